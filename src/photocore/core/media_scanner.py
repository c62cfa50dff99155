"""記憶卡 DCIM 目錄掃描。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..utils import file_classifier
from ..utils.logger import get_logger

MEDIA_DIR_NAME = "DCIM"


class MediaScanner:
    def __init__(self, logger=None) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)

    def find_media_dir(self, volume: Path) -> Optional[Path]:
        candidate = volume / MEDIA_DIR_NAME
        try:
            if candidate.is_dir():
                return candidate
        except OSError as exc:
            self.logger.warning(f"無法存取: {candidate} ({exc})")
        return None

    def collect_media_files(self, root: Path) -> list[Path]:
        """以明確堆疊走訪 root，回傳副檔名在允許清單內的檔案。

        無法讀取的目錄或項目只記錄警告並略過。
        """
        results: list[Path] = []
        stack: list[Path] = [root]
        while stack:
            current = stack.pop()
            try:
                with os.scandir(current) as iterator:
                    entries = sorted(iterator, key=lambda entry: entry.name)
            except OSError as exc:
                self.logger.warning(f"無法讀取目錄: {current} ({exc})")
                continue

            subdirs: list[Path] = []
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(Path(entry.path))
                        continue
                    if not entry.is_file():
                        continue
                except OSError as exc:
                    self.logger.warning(f"無法讀取檔案資訊: {entry.path} ({exc})")
                    continue
                path = Path(entry.path)
                if file_classifier.is_media_file(path):
                    results.append(path)

            # 反向推入，讓子目錄依名稱順序被走訪
            stack.extend(reversed(subdirs))
        return results
