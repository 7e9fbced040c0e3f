"""JSON ファイルによる KeyValueStore。

目的:
- プロセスをまたいで残るスコア保存先を提供する（ローカル 1 ファイル）。

契約:
- 値は JSON 化できるもの（str/int/bool/list/dict）に限る。
- 書き込みは一時ファイルに出力してから os.replace で差し替える（読み手は常に完全なファイルを見る）。
- ファイルが壊れている場合は空ストアとして扱う。
"""

from __future__ import annotations

import json
import logging
import os
import pathlib
import tempfile
from typing import Any

from src.memory_match.app.ports.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """1 つの JSON オブジェクトを丸ごと読み書きする実装。"""

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("store file %s is corrupt, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("store file %s does not hold an object, treating as empty", self.path)
            return {}
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".store-", suffix=".json", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            try:
                os.remove(tmp)
            except OSError:
                pass
            raise

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        return self._read_all().get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
