"""RAW 預覽的磁碟快取。"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config import ConfigManager
from ..utils import file_classifier, file_ops, hash_calc
from ..utils.logger import get_logger
from .preview_extractor import PreviewExtractor


class ThumbnailCache:
    """以 (絕對路徑, mtime) 雜湊為檔名，把內嵌預覽存成平面的 .jpg 檔。

    檔案修改後 mtime 改變，鍵也跟著改變，舊項目自然失效，不做額外清理。
    擷取失敗時不寫入任何項目，之後重試仍會重新擷取。
    """

    def __init__(
        self,
        config: ConfigManager,
        extractor: Optional[PreviewExtractor] = None,
        logger=None,
    ) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)
        self.extractor = extractor or PreviewExtractor(self.logger)
        self._configured_root = Path(str(config.get("cache.root_dir"))).expanduser()
        self._cache_root: Optional[Path] = None

    def cache_root(self) -> Path:
        if self._cache_root is None:
            root = self._configured_root.resolve()
            root.mkdir(parents=True, exist_ok=True)
            self._cache_root = root
        return self._cache_root

    def cache_path_for(self, path: Path) -> Path:
        source = path.absolute()
        key = hash_calc.compute_cache_key(source, hash_calc.mtime_ms(source.stat()))
        return self.cache_root() / key

    def get_thumbnail(self, path: Path) -> Optional[Path]:
        try:
            cached_path = self.cache_path_for(path)
        except OSError as exc:
            self.logger.warning(f"無法建立快取鍵: {path} ({exc})")
            return None

        if cached_path.exists():
            return cached_path

        preview = self.extractor.extract(path)
        if not preview:
            return None

        try:
            file_ops.atomic_write_bytes(cached_path, preview)
        except OSError as exc:
            self.logger.warning(f"無法寫入快取: {cached_path} ({exc})")
            return None
        self.logger.debug(f"CACHED: {path} -> {cached_path}")
        return cached_path

    def resolve_display_path(self, path: Path) -> Optional[Path]:
        """回傳 UI 可直接顯示的路徑。"""
        if file_classifier.is_renderable(path):
            return path
        if file_classifier.is_raw_file(path):
            return self.get_thumbnail(path)
        return None
