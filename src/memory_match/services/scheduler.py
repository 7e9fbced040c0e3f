"""
協調的な遅延実行（スレッドを使わないスケジューラ）

目的:
- 「N 秒後にセッションへ戻る」処理（判定待ち・カウントダウン）を、ブロックせずに表現する。
- Streamlit の再実行ごとに `run_pending()` を呼び、期限の来たコールバックだけを実行する。

契約:
- コールバックは期限順（同時刻なら登録順）に実行される。
- キャンセル済みのタスクは実行されない。
- time.sleep は使用しない。時計は注入可能（既定は time.monotonic）。
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledTask:
    due_at: float
    seq: int
    name: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False, repr=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    """期限付きコールバックの待ち行列。"""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._queue: list[ScheduledTask] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """delay 秒後に callback を実行するタスクを登録して返す。"""
        return self.call_at(self._clock() + max(0.0, float(delay)), callback, name)

    def call_at(self, due_at: float, callback: Callable[[], None], name: str = "") -> ScheduledTask:
        """時刻 due_at（時計と同じ基準）に callback を実行するタスクを登録して返す。"""
        task = ScheduledTask(due_at=float(due_at), seq=next(self._seq), name=name, callback=callback)
        heapq.heappush(self._queue, task)
        return task

    def cancel_all(self) -> None:
        """未実行のタスクをすべて取り消す。"""
        for task in self._queue:
            task.cancel()
        self._queue.clear()

    def run_pending(self, now: float | None = None) -> int:
        """期限の来たタスクを実行し、実行した件数を返す。

        コールバック内で登録されたタスクも、期限が来ていれば同じ呼び出しで実行する。
        """
        current = self._clock() if now is None else now
        ran = 0
        while self._queue and self._queue[0].due_at <= current:
            task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            logger.debug("run scheduled task %s (due %.3f)", task.name, task.due_at)
            task.callback()
            ran += 1
        return ran
