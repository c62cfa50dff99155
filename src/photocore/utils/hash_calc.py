"""Cache key helpers."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

CACHE_SUFFIX = ".jpg"


def mtime_ms(stat_result: os.stat_result) -> int:
    return stat_result.st_mtime_ns // 1_000_000


def compute_cache_key(path: Path, modified_ms: int) -> str:
    """以絕對路徑加上毫秒 mtime 計算快取檔名。"""
    digest = hashlib.sha256(f"{path}{modified_ms}".encode("utf-8")).hexdigest()
    return digest + CACHE_SUFFIX
