"""自訂例外。"""

from __future__ import annotations


class PhotocoreError(Exception):
    """photocore 例外的基底類別。"""


class ConfigError(PhotocoreError):
    """設定檔內容無效。"""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "invalid config")
