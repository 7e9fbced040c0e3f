from __future__ import annotations

import logging
import os
import pathlib
import tomllib
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "MEMORY_MATCH_CONFIG"
DEFAULT_CONFIG_FILE = "config.toml"


def _read_config_file() -> dict[str, Any]:
    """環境変数 MEMORY_MATCH_CONFIG、無ければカレントの config.toml を読む。"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    path = pathlib.Path(env_path) if env_path else pathlib.Path(DEFAULT_CONFIG_FILE)
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("ignoring unreadable config %s: %s", path, e)
        return {}


def _get_config() -> dict[str, Any]:
    """現在有効な設定を返す。

    方針: 設定ファイルが無い・読めない場合は空辞書を返し、各呼び出し側で default 値にフォールバックさせる。
    """
    return _read_config_file()


def get_app_title(default: str = "Memory Game") -> str:
    cfg = _get_config()
    title = cfg.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    return default


def get_store_path(default: str = ".memory_match/store.json") -> str:
    cfg = _get_config()
    storage = cfg.get("storage") or {}
    if isinstance(storage, dict):
        v = storage.get("path")
        if isinstance(v, str) and v.strip():
            return v.strip()
    return default


def load_default_settings_values() -> dict[str, Any]:
    result: dict[str, Any] = {}
    cfg = _get_config()
    settings = cfg.get("settings")
    if isinstance(settings, dict):
        # 不正な型の場合は各呼び出し側でコード既定値へフォールバックする。
        if isinstance(settings.get("difficulty"), str):
            result["difficulty"] = settings["difficulty"]
        for name in ("daily_mode", "muted", "auto_countdown"):
            if isinstance(settings.get(name), bool):
                result[name] = bool(settings[name])
        for name in ("match_delay", "mismatch_delay"):
            v = settings.get(name)
            if isinstance(v, (int, float)) and not isinstance(v, bool):
                result[name] = float(v)
    return result


if TYPE_CHECKING:
    from src.memory_match.app.state import Settings as _SettingsType


def load_settings() -> _SettingsType:
    from src.memory_match.app.state import Settings  # 局所インポートで循環回避
    from src.memory_match.domain import Difficulty

    values = load_default_settings_values()
    defaults = Settings()
    try:
        return Settings(
            difficulty=Difficulty.parse(values.get("difficulty"), defaults.difficulty),
            daily_mode=bool(values.get("daily_mode", defaults.daily_mode)),
            muted=bool(values.get("muted", defaults.muted)),
            match_delay=float(values.get("match_delay", defaults.match_delay)),
            mismatch_delay=float(values.get("mismatch_delay", defaults.mismatch_delay)),
            auto_countdown=bool(values.get("auto_countdown", defaults.auto_countdown)),
            store_path=get_store_path(defaults.store_path),
        )
    except ValueError as e:
        # 遅延の大小関係などが崩れている場合はコード既定値
        logger.warning("invalid settings in config, using defaults: %s", e)
        return Settings(store_path=get_store_path(defaults.store_path))
