from __future__ import annotations

import logging

from src.memory_match.adapters.kv_store_json import JsonFileStore
from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.app.state import Settings
from src.memory_match.domain import Difficulty
from src.memory_match.services.audio import SpokenAudioCue
from src.memory_match.services.config_loader import load_settings
from src.memory_match.services.gameplay import GameSession
from src.memory_match.services.leaderboard import LeaderboardStore

logger = logging.getLogger(__name__)

SESSION_KEY = "game_session"
SETTINGS_KEY = "settings"


def initialize_state(
    store: KeyValueStore,
    persistence: KeyValueStore | None = None,
    settings: Settings | None = None,
) -> GameSession:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    persistence を省略した場合は設定の store_path にある JSON ファイルへ保存する。
    """
    session: GameSession | None = store.get(SESSION_KEY)
    if session is not None:
        return session

    settings = settings or load_settings()
    store.set(SETTINGS_KEY, settings)
    leaderboard = LeaderboardStore(persistence or JsonFileStore(settings.store_path))
    session = GameSession(
        leaderboard,
        settings=settings,
        audio=SpokenAudioCue(store, muted=settings.muted),
    )
    session.restart(settings.difficulty, settings.daily_mode)
    store.set(SESSION_KEY, session)
    logger.info("initialized game session (store=%s)", settings.store_path)
    return session


def get_session(store: KeyValueStore) -> GameSession | None:
    return store.get(SESSION_KEY)


def get_leaderboard(
    store: KeyValueStore,
    persistence: KeyValueStore | None = None,
    settings: Settings | None = None,
) -> tuple[LeaderboardStore, Difficulty]:
    """閲覧用の成績ストアと既定表示の難易度を返す。

    セッションがあればその保存先と難易度を使う。無い場合もセッションは作らない
    （ラウンド開始・タイマー・音声キューを発生させない）。
    """
    session = get_session(store)
    if session is not None:
        return session.leaderboard, session.state.difficulty
    settings = settings or store.get(SETTINGS_KEY) or load_settings()
    return LeaderboardStore(persistence or JsonFileStore(settings.store_path)), settings.difficulty


def set_muted(store: KeyValueStore, muted: bool) -> None:
    """ミュート切替を音声キューに反映する。状態に変化がなければ何もしない。"""
    session = get_session(store)
    if session is None or not isinstance(session.audio, SpokenAudioCue):
        return
    if session.audio.muted == bool(muted):
        return
    session.audio.muted = bool(muted)
