"""從 RAW 檔中找出內嵌 JPEG 預覽。

相機在 RAW 容器開頭附近存放已壓縮好的 JPEG 預覽。這裡不解析容器結構，
只在檔案前 10 MiB 內尋找 SOI (FF D8) 與 EOI (FF D9) 標記，把每一組
成對的標記視為一個候選預覽，並挑出最大的一個。
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from ..models import PreviewSpan
from ..utils import file_ops
from ..utils.logger import get_logger

SOI_MARKER = b"\xff\xd8"
EOI_MARKER = b"\xff\xd9"
READ_LIMIT_BYTES = 10 * 1024 * 1024
MIN_PREVIEW_BYTES = 10_000


def find_preview_spans(buffer: bytes) -> List[PreviewSpan]:
    """依出現順序列出所有成對的 SOI/EOI 區間。

    新的 SOI 會取代尚未配對的 SOI；EOI 只在有待配對的 SOI 時才成立，
    配對後狀態歸零，因此可處理多段串接的影像。每段緩衝區只會被
    find/rfind 掃過常數次，整體為線性時間。
    """
    spans: list[PreviewSpan] = []
    next_soi = buffer.find(SOI_MARKER)
    next_eoi = buffer.find(EOI_MARKER)
    while next_soi != -1:
        if next_eoi != -1 and next_eoi < next_soi:
            # 沒有待配對 SOI 的 EOI 直接略過
            next_eoi = buffer.find(EOI_MARKER, next_soi + 1)
        if next_eoi == -1:
            break
        # EOI 之前最後一個 SOI 才是有效的起點
        start = buffer.rfind(SOI_MARKER, next_soi, next_eoi)
        end = next_eoi + len(EOI_MARKER)
        spans.append(PreviewSpan(start=start, end=end))
        next_soi = buffer.find(SOI_MARKER, end)
        next_eoi = buffer.find(EOI_MARKER, end)
    return spans


def select_preview_span(
    spans: Iterable[PreviewSpan], min_size: int = MIN_PREVIEW_BYTES
) -> Optional[PreviewSpan]:
    """挑出不小於 min_size 的最大區間，同樣大小時保留先出現者。"""
    best: Optional[PreviewSpan] = None
    for span in spans:
        if span.size < min_size:
            continue
        if best is None or span.size > best.size:
            best = span
    return best


def extract_from_bytes(buffer: bytes) -> Optional[bytes]:
    span = select_preview_span(find_preview_spans(buffer))
    if span is None:
        return None
    return buffer[span.start : span.end]


class PreviewExtractor:
    def __init__(self, logger=None) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)

    def extract(self, path: Path) -> Optional[bytes]:
        """回傳最佳內嵌預覽的位元組；找不到或讀取失敗時回傳 None。"""
        try:
            buffer = file_ops.read_head(path, READ_LIMIT_BYTES)
        except OSError as exc:
            self.logger.warning(f"無法讀取 RAW 檔: {path} ({exc})")
            return None

        preview = extract_from_bytes(buffer)
        if preview is None:
            self.logger.debug(f"NO_EMBEDDED_PREVIEW: {path}")
            return None
        self.logger.debug(f"EMBEDDED_PREVIEW: {path} ({len(preview)} bytes)")
        return preview
