"""アプリケーションの設定モデル定義。

目的:
- UI とサービスの境界で用いる明示的な設定構造を提供する。

使い方:
- `services.config_loader.load_settings()` で TOML から生成する。
- GameSession / UI はこの値を参照して動作する。
"""

from __future__ import annotations

from dataclasses import dataclass

from src.memory_match.domain import MATCH_DELAY, MISMATCH_DELAY, Difficulty


@dataclass(frozen=True)
class Settings:
    """画面構成や動作に関する設定。

    現状の契約:
    - difficulty / daily_mode は起動直後のラウンド設定。
    - muted は音声キューのミュート状態を示す。
    - match_delay < mismatch_delay（一致はすぐ、不一致は少し長く見せる）。
    - auto_countdown が偽なら tick() は呼び出し側が行う。
    - store_path は JSON ストアの保存先。
    """

    difficulty: Difficulty = Difficulty.EASY
    daily_mode: bool = False
    muted: bool = False
    match_delay: float = MATCH_DELAY
    mismatch_delay: float = MISMATCH_DELAY
    auto_countdown: bool = True
    store_path: str = ".memory_match/store.json"

    def __post_init__(self) -> None:
        if self.match_delay < 0 or self.mismatch_delay < 0:
            raise ValueError("settle delays must be non-negative")
        if self.match_delay >= self.mismatch_delay:
            raise ValueError("match_delay must be shorter than mismatch_delay")
