"""記憶卡偵測事件。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Tuple

PREVIEW_LIMIT = 10


@dataclass(frozen=True)
class CardDetectedEvent:
    drive: Path
    dcim_path: Path
    image_count: int
    images: Tuple[Path, ...] = field(default_factory=tuple)

    @classmethod
    def from_scan(cls, drive: Path, dcim_path: Path, files: list[Path]) -> "CardDetectedEvent":
        return cls(
            drive=drive,
            dcim_path=dcim_path,
            image_count=len(files),
            images=tuple(files[:PREVIEW_LIMIT]),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "drive": str(self.drive),
            "dcimPath": str(self.dcim_path),
            "imageCount": self.image_count,
            "images": [str(path) for path in self.images],
        }
