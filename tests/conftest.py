from __future__ import annotations

from collections import Counter
from datetime import date

import pytest

from src.memory_match.adapters.kv_store_memory import MemoryStore
from src.memory_match.app.state import Settings
from src.memory_match.domain import SYMBOL_PALETTE, Board, Card, Difficulty
from src.memory_match.services.gameplay import GameSession
from src.memory_match.services.leaderboard import LeaderboardStore
from src.memory_match.services.scheduler import Scheduler

# easy 用の固定盤面: (0,5)=flower (1,4)=star (2,7)=moon (3,6)=heart
EASY_LAYOUT = ["flower", "star", "moon", "heart", "star", "flower", "heart", "moon"]
EASY_PAIRS = [(0, 5), (1, 4), (2, 7), (3, 6)]


class FakeClock:
    """手動で進める時計。"""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingAudio:
    """AudioCue の通知を記録する。"""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def round_started(self, difficulty: Difficulty) -> None:
        self.events.append(("started", difficulty))

    def matched(self) -> None:
        self.events.append(("matched", None))

    def round_stopped(self, won: bool) -> None:
        self.events.append(("stopped", won))


def symbol_counts(board: Board) -> Counter[str]:
    return Counter(card.symbol for card in board)


def pending_tasks(scheduler: Scheduler) -> list:
    """キャンセルされていない予約タスク。"""
    return [t for t in scheduler._queue if not t.cancelled]  # noqa: SLF001


def fixed_board(difficulty: Difficulty, daily_mode: bool) -> Board:
    """easy は EASY_LAYOUT、それ以外は i と i + pair_count が同じ絵柄の盤面。"""
    if difficulty is Difficulty.EASY:
        return tuple(Card(symbol=s) for s in EASY_LAYOUT)
    symbols = list(SYMBOL_PALETTE[: difficulty.pair_count])
    return tuple(Card(symbol=s) for s in symbols + symbols)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def today() -> list[date]:
    """テスト中に差し替え可能な「今日」。"""
    return [date(2026, 10, 19)]


@pytest.fixture
def leaderboard(memory_store: MemoryStore, today: list[date]) -> LeaderboardStore:
    return LeaderboardStore(memory_store, today=lambda: today[0])


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def make_session(clock: FakeClock, leaderboard: LeaderboardStore, audio: RecordingAudio, today: list[date]):
    def _make(**settings_kwargs) -> GameSession:
        settings_kwargs.setdefault("auto_countdown", False)
        return GameSession(
            leaderboard,
            settings=Settings(**settings_kwargs),
            scheduler=Scheduler(clock=clock),
            audio=audio,
            today=lambda: today[0],
            board_factory=fixed_board,
        )

    return _make
