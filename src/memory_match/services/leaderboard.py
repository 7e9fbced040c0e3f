"""
スコア永続化サービス（ハイスコア・リーダーボード・デイリー達成フラグ）

目的:
- 難易度ごとの上位 10 件、ハイスコア、日付ごとの達成フラグをキー値ストアに保存・取得する。

キー:
- HighScore_{difficulty}: int
- Leaderboard_{difficulty}: JSON 文字列 [{id, score, moves, timestamp}, ...]（スコア降順）
- DailyCompleted_{difficulty}_{YYYY-MM-DD}: bool（難易度省略時は DailyCompleted_{YYYY-MM-DD}）

エラー方針:
- 保存データが壊れている場合は「無い」ものとして扱う（空リスト / 0 / False）。
- ストア自体が使えない場合は警告ログを出して何もしない。セッションは継続する。
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable
from datetime import date
from typing import Any

import pandas as pd

from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import Difficulty, ScoreEntry
from src.memory_match.domain.constants import (
    DAILY_COMPLETED_KEY_PREFIX,
    HIGH_SCORE_KEY_PREFIX,
    LEADERBOARD_KEY_PREFIX,
    LEADERBOARD_LIMIT,
)

logger = logging.getLogger(__name__)


def high_score_key(difficulty: Difficulty) -> str:
    return f"{HIGH_SCORE_KEY_PREFIX}{difficulty.value}"


def leaderboard_key(difficulty: Difficulty) -> str:
    return f"{LEADERBOARD_KEY_PREFIX}{difficulty.value}"


def daily_completed_key(day: date, difficulty: Difficulty | None = None) -> str:
    if difficulty is None:
        return f"{DAILY_COMPLETED_KEY_PREFIX}{day.isoformat()}"
    return f"{DAILY_COMPLETED_KEY_PREFIX}{difficulty.value}_{day.isoformat()}"


def decode_leaderboard(raw: Any) -> list[ScoreEntry]:  # noqa: ANN401 - 保存値は型不定
    """保存値からエントリ列を復元する。形が不正なら空リスト。"""
    if raw is None:
        return []
    try:
        items = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
        if not isinstance(items, list):
            raise TypeError("leaderboard must be a list")
        return [ScoreEntry.from_dict(item) for item in items]
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("discarding unreadable leaderboard data: %s", e)
        return []


def encode_leaderboard(entries: list[ScoreEntry]) -> str:
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False)


def rank_entries(entries: list[ScoreEntry], limit: int = LEADERBOARD_LIMIT) -> list[ScoreEntry]:
    """スコア降順（同点は先着優先）に並べ、上位 limit 件に切り詰める。"""
    return sorted(entries, key=lambda e: e.score, reverse=True)[:limit]


def leaderboard_frame(entries: list[ScoreEntry]) -> pd.DataFrame:
    """リーダーボード表示用の DataFrame を返す。

    列: rank, score, moves, played_at（ローカル時刻の文字列）
    """
    columns = ["rank", "score", "moves", "played_at"]
    if not entries:
        return pd.DataFrame(columns=columns)
    rows = [
        {
            "rank": i + 1,
            "score": e.score,
            "moves": e.moves,
            "played_at": e.timestamp.astimezone().strftime("%Y-%m-%d %H:%M"),
        }
        for i, e in enumerate(entries)
    ]
    return pd.DataFrame(rows, columns=columns)


class LeaderboardStore:
    """難易度ごとのスコア記録を KeyValueStore 経由で読み書きする。"""

    def __init__(
        self,
        store: KeyValueStore,
        today: Callable[[], date] = date.today,
        limit: int = LEADERBOARD_LIMIT,
    ) -> None:
        self._store = store
        self._today = today
        self._limit = limit

    # ---- 低レベル（ストア障害を握る） ----

    def _get(self, key: str) -> Any:  # noqa: ANN401
        try:
            return self._store.get(key)
        except Exception as e:
            logger.warning("store unavailable while reading %s: %s", key, e)
            return None

    def _set(self, key: str, value: Any) -> bool:  # noqa: ANN401
        try:
            self._store.set(key, value)
            return True
        except Exception as e:
            logger.warning("store unavailable while writing %s: %s", key, e)
            return False

    def _remove(self, key: str) -> None:
        try:
            self._store.remove(key)
        except Exception as e:
            logger.warning("store unavailable while removing %s: %s", key, e)

    # ---- リーダーボード ----

    def load_leaderboard(self, difficulty: Difficulty) -> list[ScoreEntry]:
        return decode_leaderboard(self._get(leaderboard_key(difficulty)))

    def save_score_entry(self, difficulty: Difficulty, entry: ScoreEntry) -> list[ScoreEntry]:
        """エントリを追加し、並べ替え・切り詰めた結果を 1 回の set で保存して返す。"""
        entries = rank_entries([*self.load_leaderboard(difficulty), entry], self._limit)
        self._set(leaderboard_key(difficulty), encode_leaderboard(entries))
        return entries

    def average_score(self, difficulty: Difficulty) -> int:
        """保存済みスコアの平均（整数切り捨て）。空なら 0。"""
        entries = self.load_leaderboard(difficulty)
        if not entries:
            return 0
        return sum(e.score for e in entries) // len(entries)

    # ---- ハイスコア ----

    def load_high_score(self, difficulty: Difficulty) -> int:
        raw = self._get(high_score_key(difficulty))
        if raw is None:
            return 0
        if isinstance(raw, float) and not (math.isfinite(raw) and raw.is_integer()):
            logger.warning("discarding unreadable high score for %s: %r", difficulty.value, raw)
            return 0
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning("discarding unreadable high score for %s: %r", difficulty.value, raw)
            return 0
        return max(0, value)

    def save_high_score(self, difficulty: Difficulty, value: int) -> None:
        self._set(high_score_key(difficulty), int(value))

    def reset_high_score(self, difficulty: Difficulty) -> None:
        self._remove(high_score_key(difficulty))

    # ---- デイリー達成フラグ ----

    def is_completed_today(self, difficulty: Difficulty | None = None) -> bool:
        """今日の日付キーのフラグを返す。日付が変わればキーも変わるため自然に False に戻る。"""
        return self._get(daily_completed_key(self._today(), difficulty)) is True

    def mark_completed_today(self, difficulty: Difficulty | None = None) -> None:
        self._set(daily_completed_key(self._today(), difficulty), True)
