"""工具模組。"""

from . import file_classifier, file_ops, hash_calc
from .cancel import CancelledError, CancellationToken

__all__ = ["file_classifier", "file_ops", "hash_calc", "CancelledError", "CancellationToken"]
