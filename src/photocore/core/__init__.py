"""核心流程模組。"""

from .media_scanner import MEDIA_DIR_NAME, MediaScanner
from .preview_extractor import (
    MIN_PREVIEW_BYTES,
    READ_LIMIT_BYTES,
    PreviewExtractor,
    extract_from_bytes,
    find_preview_spans,
    select_preview_span,
)
from .project_library import ProjectLibrary
from .thumbnail_cache import ThumbnailCache
from .transfer import TransferEngine, summarize
from .volume_monitor import VolumeMonitor, enumerate_volumes

__all__ = [
    "MEDIA_DIR_NAME",
    "MIN_PREVIEW_BYTES",
    "READ_LIMIT_BYTES",
    "MediaScanner",
    "PreviewExtractor",
    "ProjectLibrary",
    "ThumbnailCache",
    "TransferEngine",
    "VolumeMonitor",
    "enumerate_volumes",
    "extract_from_bytes",
    "find_preview_spans",
    "select_preview_span",
    "summarize",
]
