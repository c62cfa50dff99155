"""列出專案資料夾中的影像。"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from ..models import ImageEntry
from ..utils import file_classifier, image_utils
from ..utils.logger import get_logger


class ProjectLibrary:
    def __init__(self, logger=None) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)

    def list_project_images(self, project_root: Path, folder: Optional[str] = None) -> list[ImageEntry]:
        folders = [folder] if folder else list(file_classifier.PROJECT_FOLDERS)
        entries: list[ImageEntry] = []
        for name in folders:
            folder_path = project_root / name
            if not folder_path.is_dir():
                continue
            try:
                children = sorted(folder_path.iterdir())
            except OSError as exc:
                self.logger.warning(f"無法讀取資料夾: {folder_path} ({exc})")
                continue
            for path in children:
                entry = self._build_entry(path, name)
                if entry is not None:
                    entries.append(entry)

        entries.sort(key=lambda item: item.modified_at, reverse=True)
        return entries

    def _build_entry(self, path: Path, folder: str) -> Optional[ImageEntry]:
        if not (file_classifier.is_renderable(path) or file_classifier.is_raw_file(path)):
            return None
        try:
            stat = path.stat()
        except OSError as exc:
            self.logger.warning(f"無法讀取檔案資訊: {path} ({exc})")
            return None
        if not path.is_file():
            return None

        resolution = None
        if file_classifier.is_renderable(path):
            resolution = image_utils.get_image_resolution(path, self.logger)

        return ImageEntry(
            name=path.name,
            path=path,
            folder=folder,
            extension=file_classifier.extension_of(path),
            size_bytes=stat.st_size,
            modified_at=datetime.fromtimestamp(stat.st_mtime),
            resolution=resolution,
        )
