"""串流複製與安全寫入。"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional

from .cancel import CancellationToken


def read_head(path: Path, limit: int) -> bytes:
    """最多讀取檔案開頭 limit 個位元組。"""
    with path.open("rb") as handle:
        return handle.read(limit)


def chunked_copy(
    src_path: Path,
    dst_path: Path,
    *,
    chunk_size_kb: int = 1024,
    progress_callback: Optional[Callable[[int, int], None]] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> int:
    """以固定大小區塊複製，目的檔已存在時拋出 FileExistsError。

    失敗時會刪除寫到一半的目的檔。
    """
    try:
        total_size = src_path.stat().st_size
    except OSError:
        total_size = 0

    bytes_copied = 0
    with src_path.open("rb") as source:
        target = dst_path.open("xb")
        try:
            with target:
                while True:
                    if cancel_token is not None:
                        cancel_token.raise_if_cancelled(str(src_path))
                    chunk = source.read(chunk_size_kb * 1024)
                    if not chunk:
                        break
                    target.write(chunk)
                    bytes_copied += len(chunk)
                    if progress_callback is not None:
                        progress_callback(bytes_copied, total_size)
        except BaseException:
            dst_path.unlink(missing_ok=True)
            raise
    return bytes_copied


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """先寫入同目錄暫存檔再改名，讀取端不會看到半個檔案。"""
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        temp_path.replace(path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
