"""
シード付きシャッフル（デイリーチャレンジ用）

目的:
- 同じ日付なら全プレイヤーが同じ絵柄セットを引けるよう、再現可能な乱数列を提供する。

契約:
- 漸化式は state' = state * 6364136223846793005 + 1 (mod 2**64)。
- 初期状態は seed を符号なし 64bit に読み替えた値。
- 同じ seed から作った 2 つのインスタンスは同一の列を返す。
"""

from __future__ import annotations

import hashlib
from collections.abc import Iterator, Sequence
from datetime import date
from typing import TypeVar

T = TypeVar("T")

_MULTIPLIER = 6364136223846793005
_INCREMENT = 1
_MASK = (1 << 64) - 1


class DeterministicShuffler:
    """64bit 線形合同法による乱数列。"""

    def __init__(self, seed: int) -> None:
        self._seed = seed & _MASK
        self._state = self._seed

    @property
    def seed(self) -> int:
        return self._seed

    def next(self) -> int:
        """次の 64bit 値を返す。"""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK
        return self._state

    def reset(self) -> None:
        """列を先頭からやり直す。"""
        self._state = self._seed

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Fisher-Yates で並べ替えた新しいリストを返す（入力は変更しない）。"""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.next() % (i + 1)
            out[i], out[j] = out[j], out[i]
        return out


def daily_seed(day: date) -> int:
    """日付（YYYYMMDD）から安定したシード値を得る。

    プロセスをまたいでも同じ値になるよう、組み込み hash() ではなく SHA-256 の先頭 8 バイトを使う。
    """
    digest = hashlib.sha256(day.strftime("%Y%m%d").encode("ascii")).digest()
    return int.from_bytes(digest[:8], "big")
