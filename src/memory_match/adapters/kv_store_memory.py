"""メモリ上の KeyValueStore（テスト・一時利用向け）。"""

from __future__ import annotations

from typing import Any

from src.memory_match.app.ports.kv_store import KeyValueStore


class MemoryStore(KeyValueStore):
    """dict をそのまま使う実装。"""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
