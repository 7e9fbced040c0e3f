from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from io import BytesIO

from gtts import gTTS

from src.memory_match.app.ports.kv_store import KeyValueStore
from src.memory_match.domain import Difficulty

logger = logging.getLogger(__name__)

# UI の音声プレーヤーが消費するキュー（読み上げテキストのリスト）
AUDIO_QUEUE_KEY = "audio_queue"

CUE_TEXTS: dict[str, str] = {
    "start": "Ready, go! {level} level.",
    "match": "Match!",
    "won": "You won!",
    "expired": "Time is up.",
}


@lru_cache(maxsize=64)
def _synthesize_cached(text: str, lang: str) -> bytes:
    # 失敗時は例外のまま抜ける（lru_cache は例外を記憶しない）
    tts = gTTS(text=text, lang=lang)
    bio = BytesIO()
    tts.write_to_fp(bio)
    return bio.getvalue()


def synthesize_cue(text: str, lang: str = "en") -> bytes | None:
    """読み上げテキストから音声(mp3)のバイト列を生成して返す。

    - gTTS のネットワーク障害などが起きた場合は None を返す（失敗はキャッシュしない）。
    - 成功した結果はテキストごとにメモリキャッシュ。
    """
    if not text:
        return None
    try:
        return _synthesize_cached(text, lang)
    except Exception as e:
        logger.warning("speech synthesis failed for %r: %s", text, e)
        return None


class SpokenAudioCue:
    """AudioCue の読み上げ実装。

    通知ではテキストを store の audio_queue に積むだけで、合成はしない。
    合成と再生は UI 側（`ui.audio_player`）がキューを消費するときに行う。
    """

    def __init__(self, store: KeyValueStore, muted: bool = False) -> None:
        self._store = store
        self.muted = muted

    def _enqueue(self, text: str) -> None:
        if self.muted:
            return
        queue: list[str] = list(self._store.get(AUDIO_QUEUE_KEY) or [])
        queue.append(text)
        self._store.set(AUDIO_QUEUE_KEY, queue)

    def round_started(self, difficulty: Difficulty) -> None:
        self._enqueue(CUE_TEXTS["start"].format(level=difficulty.label))

    def matched(self) -> None:
        self._enqueue(CUE_TEXTS["match"])

    def round_stopped(self, won: bool) -> None:
        self._enqueue(CUE_TEXTS["won"] if won else CUE_TEXTS["expired"])


def drain_audio_queue(store: KeyValueStore) -> list[str]:
    """キューの中身（読み上げテキスト）を取り出して空にする。"""
    queue: list[str] = list(store.get(AUDIO_QUEUE_KEY) or [])
    if queue:
        store.set(AUDIO_QUEUE_KEY, [])
    return queue


def drain_audio_bytes(
    store: KeyValueStore,
    synthesize: Callable[[str], bytes | None] = synthesize_cue,
) -> list[bytes]:
    """キューを空にし、合成できた音声だけを順に返す（描画時に呼ぶ）。"""
    out: list[bytes] = []
    for text in drain_audio_queue(store):
        audio_bytes = synthesize(text)
        if audio_bytes:
            out.append(audio_bytes)
    return out
