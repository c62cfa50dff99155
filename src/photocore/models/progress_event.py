"""匯入進度事件模型。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransferProgress:
    completed: int
    total: int
    current_file: str

    def to_dict(self) -> dict[str, object]:
        return {
            "completed": self.completed,
            "total": self.total,
            "currentFile": self.current_file,
        }
