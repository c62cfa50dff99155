"""批次作業的協作取消。"""

from __future__ import annotations

import threading


class CancelledError(Exception):
    """作業已由使用者取消。"""


class CancellationToken:
    """跨執行緒共用的取消旗標，在每個檔案之間檢查。"""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, what: str) -> None:
        if self._event.is_set():
            raise CancelledError(f"已取消: {what}")
