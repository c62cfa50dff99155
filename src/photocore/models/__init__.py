"""資料模型模組。"""

from .card_event import CardDetectedEvent
from .image_entry import ImageEntry
from .preview_span import PreviewSpan
from .progress_event import TransferProgress
from .transfer_result import TransferErrorCode, TransferResult, TransferSummary

__all__ = [
    "CardDetectedEvent",
    "ImageEntry",
    "PreviewSpan",
    "TransferErrorCode",
    "TransferProgress",
    "TransferResult",
    "TransferSummary",
]
