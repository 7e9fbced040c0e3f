"""
ゲームセッションの状態機械（純粋関数）

目的:
- UI から切り離した不変スナップショット `SessionState` と、次状態を返す更新関数を提供する。
- 時間待ち（判定の保留・カウントダウン）は扱わず、呼び出し側がスケジュールする。

状態遷移:
    idle → playing → resolving → playing | won
    playing/resolving → expired（残り時間 0）
    won/expired は start_round まで終端。

使い方:
- `start_round()` で新しい盤面を載せる。
- `flip_card()` が `Resolution` を返したら、遅延後に `resolve_pair()` を呼ぶ。
- 1 秒ごとに `tick_countdown()` を呼ぶ。
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from src.memory_match.domain.constants import MATCH_POINTS
from src.memory_match.domain.data import Board, Difficulty
from src.memory_match.domain.game import all_matched


class Phase(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    RESOLVING = "resolving"
    WON = "won"
    EXPIRED = "expired"


@dataclass(frozen=True)
class Resolution:
    """2 枚目をめくった直後に予約される自動判定。

    epoch はラウンドの世代番号。リスタート後の古い判定は epoch 不一致で無視される。
    """

    epoch: int
    first: int
    second: int
    matched: bool


@dataclass(frozen=True)
class SessionState:
    """描画層へ渡す読み取り専用スナップショット。"""

    difficulty: Difficulty = Difficulty.EASY
    daily_mode: bool = False
    board: Board = ()
    pending_index: int | None = None
    input_locked: bool = False
    score: int = 0
    moves: int = 0
    time_remaining: int = 0
    high_score: int = 0
    completed_today: bool = False
    phase: Phase = Phase.IDLE
    epoch: int = 0
    timer_running: bool = False

    @property
    def accepts_flips(self) -> bool:
        return self.phase is Phase.PLAYING and not self.input_locked


def start_round(
    state: SessionState,
    difficulty: Difficulty,
    daily_mode: bool,
    board: Board,
    *,
    high_score: int = 0,
    completed_today: bool = False,
) -> SessionState:
    """新しいラウンドを開始した状態を返す（epoch を 1 進める）。"""
    return SessionState(
        difficulty=difficulty,
        daily_mode=daily_mode,
        board=board,
        time_remaining=difficulty.time_limit_seconds,
        high_score=max(0, int(high_score)),
        completed_today=completed_today,
        phase=Phase.PLAYING,
        epoch=state.epoch + 1,
        timer_running=True,
    )


def _with_card(board: Board, index: int, **changes: bool) -> Board:
    cards = list(board)
    cards[index] = replace(cards[index], **changes)
    return tuple(cards)


def flip_card(state: SessionState, index: int) -> tuple[SessionState, Resolution | None]:
    """カードをめくる。

    - 入力ロック中・プレイ中以外・範囲外・表向き/成立済みのカードは何もしない。
    - 1 枚目は保留として記録するだけ（手数は増えない）。
    - 2 枚目で手数 +1、入力ロックし、予約すべき `Resolution` を返す。
    """
    if not state.accepts_flips:
        return state, None
    if not 0 <= index < len(state.board):
        return state, None
    card = state.board[index]
    if card.revealed or card.matched:
        return state, None

    board = _with_card(state.board, index, revealed=True)
    first = state.pending_index
    if first is None:
        return replace(state, board=board, pending_index=index), None

    resolution = Resolution(
        epoch=state.epoch,
        first=first,
        second=index,
        matched=board[first].symbol == board[index].symbol,
    )
    next_state = replace(
        state,
        board=board,
        moves=state.moves + 1,
        input_locked=True,
        phase=Phase.RESOLVING,
    )
    return next_state, resolution


def resolve_pair(state: SessionState, resolution: Resolution) -> SessionState:
    """予約済みの判定を適用する。

    世代・フェーズ・保留カードのいずれかが一致しない（古い予約）場合は状態を変えない。
    全カード成立で won に遷移し、タイマーを止める。
    """
    if (
        resolution.epoch != state.epoch
        or state.phase is not Phase.RESOLVING
        or state.pending_index != resolution.first
    ):
        return state

    if resolution.matched:
        board = _with_card(state.board, resolution.first, matched=True)
        board = _with_card(board, resolution.second, matched=True)
        score = state.score + MATCH_POINTS
    else:
        board = _with_card(state.board, resolution.first, revealed=False)
        board = _with_card(board, resolution.second, revealed=False)
        score = state.score

    next_state = replace(
        state,
        board=board,
        score=score,
        pending_index=None,
        input_locked=False,
        phase=Phase.PLAYING,
    )
    if resolution.matched and all_matched(board):
        next_state = replace(next_state, phase=Phase.WON, timer_running=False)
    return next_state


def tick_countdown(state: SessionState) -> SessionState:
    """残り時間を 1 秒減らす。0 に達したらタイマーを止めて expired に遷移する。"""
    if not state.timer_running:
        return state
    remaining = max(0, state.time_remaining - 1)
    if remaining > 0:
        return replace(state, time_remaining=remaining)
    return replace(
        state,
        time_remaining=0,
        timer_running=False,
        input_locked=True,
        phase=Phase.EXPIRED,
    )
