"""
アプリケーション層のポート: 効果音/音声キュー

目的:
- セッションから音声再生を切り離す（グローバルなシングルトンを持たない）。
- 通知は投げっぱなしで、戻り値は参照しない。
"""

from __future__ import annotations

from typing import Protocol

from src.memory_match.domain import Difficulty


class AudioCue(Protocol):
    """ラウンド進行の通知先。"""

    def round_started(self, difficulty: Difficulty) -> None:
        """ラウンド開始時に呼ばれる。"""

    def matched(self) -> None:
        """ペア成立時に呼ばれる。"""

    def round_stopped(self, won: bool) -> None:
        """クリアまたは時間切れでラウンドが止まったときに呼ばれる。"""


class NullAudioCue:
    """何も鳴らさない実装（テスト・無音環境用）。"""

    def round_started(self, difficulty: Difficulty) -> None:
        return None

    def matched(self) -> None:
        return None

    def round_stopped(self, won: bool) -> None:
        return None
