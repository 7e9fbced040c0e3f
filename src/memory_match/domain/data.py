from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class Difficulty(str, Enum):
    """難易度。

    現状の契約:
    - value は永続化キーに使う名前（easy/medium/hard）。
    - pair_count / time_limit_seconds は固定値。
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def pair_count(self) -> int:
        return _PAIR_COUNTS[self]

    @property
    def time_limit_seconds(self) -> int:
        return _TIME_LIMITS[self]

    @property
    def theme_color(self) -> str:
        """UI 背景色（薄い RGBA）。"""
        return _THEME_COLORS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: object, default: Difficulty | None = None) -> Difficulty:
        """文字列から難易度を得る。解釈できなければ default（未指定時は EASY）。"""
        if isinstance(value, Difficulty):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return default if default is not None else cls.EASY


_PAIR_COUNTS: dict[Difficulty, int] = {
    Difficulty.EASY: 4,
    Difficulty.MEDIUM: 6,
    Difficulty.HARD: 10,
}

_TIME_LIMITS: dict[Difficulty, int] = {
    Difficulty.EASY: 60,
    Difficulty.MEDIUM: 45,
    Difficulty.HARD: 30,
}

_THEME_COLORS: dict[Difficulty, str] = {
    Difficulty.EASY: "rgba(52, 199, 89, 0.2)",
    Difficulty.MEDIUM: "rgba(255, 149, 0, 0.2)",
    Difficulty.HARD: "rgba(255, 59, 48, 0.2)",
}


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Card:
    """盤面の 1 枚。

    現状の契約:
    - id: 盤面生成ごとに新規採番される一意 ID
    - symbol: パレット中の絵柄名
    - revealed: 表向きか
    - matched: ペア成立済みか（matched なら revealed も真）
    """

    symbol: str
    id: str = field(default_factory=_new_id)
    revealed: bool = False
    matched: bool = False

    def __post_init__(self) -> None:
        if self.matched and not self.revealed:
            raise ValueError("matched card must be revealed")

    @property
    def face_up(self) -> bool:
        return self.revealed or self.matched


# 盤面はカードの不変列
Board = tuple[Card, ...]


@dataclass(frozen=True)
class ScoreEntry:
    """リーダーボードの 1 件（作成後は不変）。"""

    score: int
    moves: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "score": self.score,
            "moves": self.moves,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ScoreEntry:
        """保存形式から復元する。形が不正なら ValueError / KeyError / TypeError を送出する。"""
        score = raw["score"]
        moves = raw["moves"]
        if isinstance(score, bool) or not isinstance(score, int):
            raise TypeError("score must be int")
        if isinstance(moves, bool) or not isinstance(moves, int):
            raise TypeError("moves must be int")
        timestamp = datetime.fromisoformat(str(raw["timestamp"]))
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        return cls(score=score, moves=moves, timestamp=timestamp, id=str(raw["id"]))
