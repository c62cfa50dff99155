"""專案內影像清單項目。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class ImageEntry:
    name: str
    path: Path
    folder: str
    extension: str
    size_bytes: int
    modified_at: datetime
    resolution: Optional[Tuple[int, int]] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "path": str(self.path),
            "folder": self.folder,
            "extension": self.extension,
            "size_bytes": self.size_bytes,
            "modified_at": self.modified_at.isoformat(),
            "resolution": list(self.resolution) if self.resolution else None,
        }
