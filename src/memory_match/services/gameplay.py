from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import replace
from datetime import date

from src.memory_match.app.ports.audio import AudioCue, NullAudioCue
from src.memory_match.app.state import Settings
from src.memory_match.domain import (
    TICK_INTERVAL,
    Board,
    Difficulty,
    Phase,
    Resolution,
    ScoreEntry,
    SessionState,
    flip_card,
    generate_board,
    resolve_pair,
    start_round,
    tick_countdown,
)
from src.memory_match.services.leaderboard import LeaderboardStore
from src.memory_match.services.scheduler import Scheduler, ScheduledTask

# UI からのイベント（めくる、リスタート、時間経過）を受け取り、
# 状態更新・遅延判定の予約・スコア保存を一箇所に集約する。
# 本モジュールは UI フレームワークに依存しない。

logger = logging.getLogger(__name__)

BoardFactory = Callable[[Difficulty, bool], Board]


class GameSession:
    """1 ラウンド分の進行を管理する。

    現状の契約:
    - 状態は不変スナップショット `state` として公開し、更新は restart/flip/tick のみ。
    - 判定待ちとカウントダウンは Scheduler に予約し、`pump()` で期限の来たものを実行する。
    - restart は未実行の予約をすべて取り消し、epoch を進める（古い予約は状態を変えない）。
    - 不正な操作は例外にせず無視する。
    """

    def __init__(
        self,
        leaderboard: LeaderboardStore,
        *,
        settings: Settings | None = None,
        scheduler: Scheduler | None = None,
        audio: AudioCue | None = None,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
        board_factory: BoardFactory | None = None,
    ) -> None:
        self.leaderboard = leaderboard
        self.settings = settings or Settings()
        self.scheduler = scheduler or Scheduler()
        self.audio: AudioCue = audio or NullAudioCue()
        self._rng = rng
        self._today = today
        self._board_factory = board_factory
        self._state = SessionState(difficulty=self.settings.difficulty, daily_mode=self.settings.daily_mode)
        self._tick_task: ScheduledTask | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    # ---- 操作 ----

    def restart(self, difficulty: Difficulty | None = None, daily_mode: bool | None = None) -> SessionState:
        """新しい盤面でラウンドを開始する。

        引数が未指定なら現在の難易度・モードを引き継ぐ。
        """
        difficulty = difficulty if difficulty is not None else self._state.difficulty
        daily_mode = daily_mode if daily_mode is not None else self._state.daily_mode

        self.scheduler.cancel_all()
        self._tick_task = None

        board = self._make_board(difficulty, daily_mode)
        self._state = start_round(
            self._state,
            difficulty,
            daily_mode,
            board,
            high_score=self.leaderboard.load_high_score(difficulty),
            completed_today=self.leaderboard.is_completed_today(difficulty),
        )
        logger.debug(
            "round %d started: difficulty=%s daily=%s", self._state.epoch, difficulty.value, daily_mode
        )
        if self.settings.auto_countdown:
            self._schedule_tick(self.scheduler.now() + TICK_INTERVAL)
        self.audio.round_started(difficulty)
        return self._state

    def flip(self, index: int) -> SessionState:
        """カードをめくる。2 枚目なら一致/不一致の判定を遅延予約する。"""
        self._state, resolution = flip_card(self._state, index)
        if resolution is not None:
            delay = self.settings.match_delay if resolution.matched else self.settings.mismatch_delay
            self.scheduler.call_later(
                delay,
                lambda: self._resolve(resolution),
                name=f"resolve-{resolution.epoch}-{resolution.first}-{resolution.second}",
            )
        return self._state

    def tick(self) -> SessionState:
        """残り時間を 1 秒進める。0 で時間切れ（スコアは保存しない）。"""
        before = self._state
        self._state = tick_countdown(before)
        if self._state.phase is Phase.EXPIRED and before.phase is not Phase.EXPIRED:
            self._cancel_tick()
            logger.debug("round %d expired: score=%d moves=%d", self._state.epoch, self._state.score, self._state.moves)
            self.audio.round_stopped(won=False)
        return self._state

    def pump(self, now: float | None = None) -> SessionState:
        """期限の来た予約（判定・カウントダウン）を実行する。"""
        self.scheduler.run_pending(now)
        return self._state

    def average_score(self, difficulty: Difficulty | None = None) -> int:
        return self.leaderboard.average_score(difficulty or self._state.difficulty)

    def reset_high_score(self) -> SessionState:
        """現在の難易度のハイスコアを消去する。"""
        self.leaderboard.reset_high_score(self._state.difficulty)
        self._state = replace(self._state, high_score=0)
        return self._state

    # ---- 内部 ----

    def _make_board(self, difficulty: Difficulty, daily_mode: bool) -> Board:
        if self._board_factory is not None:
            return self._board_factory(difficulty, daily_mode)
        return generate_board(difficulty, daily_mode, day=self._today(), rng=self._rng)

    def _schedule_tick(self, due_at: float) -> None:
        epoch = self._state.epoch

        def _on_tick() -> None:
            if self._state.epoch != epoch or not self._state.timer_running:
                return
            self.tick()
            if self._state.timer_running:
                self._schedule_tick(due_at + TICK_INTERVAL)

        self._tick_task = self.scheduler.call_at(due_at, _on_tick, name=f"tick-{epoch}")

    def _cancel_tick(self) -> None:
        if self._tick_task is not None:
            self._tick_task.cancel()
            self._tick_task = None

    def _resolve(self, resolution: Resolution) -> None:
        before = self._state
        self._state = resolve_pair(before, resolution)
        if self._state is before:
            # 古い予約（リスタート済み等）
            return
        if resolution.matched:
            self.audio.matched()
        if self._state.phase is Phase.WON:
            self._finish_won()

    def _finish_won(self) -> None:
        """クリア時の処理: タイマー停止、ハイスコア・記録・デイリー達成の保存。"""
        self._cancel_tick()
        state = self._state
        if state.score > state.high_score:
            self.leaderboard.save_high_score(state.difficulty, state.score)
            state = replace(state, high_score=state.score)
        self.leaderboard.save_score_entry(state.difficulty, ScoreEntry(score=state.score, moves=state.moves))
        if state.daily_mode:
            self.leaderboard.mark_completed_today(state.difficulty)
            state = replace(state, completed_today=True)
        self._state = state
        logger.info(
            "round %d won: difficulty=%s score=%d moves=%d",
            state.epoch,
            state.difficulty.value,
            state.score,
            state.moves,
        )
        self.audio.round_stopped(won=True)
