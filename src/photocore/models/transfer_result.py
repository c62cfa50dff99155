"""單檔匯入結果與批次統計。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional


class TransferErrorCode(str, Enum):
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    IO_ERROR = "IO_ERROR"
    CANCELLED = "CANCELLED"


@dataclass
class TransferResult:
    source: Path
    success: bool
    destination: Optional[Path] = None
    error_code: Optional[TransferErrorCode] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, source: Path, destination: Path) -> "TransferResult":
        return cls(source=source, success=True, destination=destination)

    @classmethod
    def failed(cls, source: Path, code: TransferErrorCode, message: str) -> "TransferResult":
        return cls(source=source, success=False, error_code=code, error_message=message)

    def to_dict(self) -> dict[str, object]:
        return {
            "file": str(self.source),
            "success": self.success,
            "destination": str(self.destination) if self.destination else None,
            "error_code": self.error_code.value if self.error_code else None,
            "error": self.error_message,
        }


@dataclass(frozen=True)
class TransferSummary:
    total: int
    succeeded: int
    failed: int

    @classmethod
    def from_results(cls, results: Iterable[TransferResult]) -> "TransferSummary":
        items = list(results)
        succeeded = sum(1 for item in items if item.success)
        return cls(total=len(items), succeeded=succeeded, failed=len(items) - succeeded)
