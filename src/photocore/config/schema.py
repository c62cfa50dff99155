"""設定檔驗證邏輯。"""

from __future__ import annotations

import logging
from typing import Any


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    cache = config.get("cache", {})
    root_dir = cache.get("root_dir")
    if not isinstance(root_dir, str) or not root_dir.strip():
        add_error("cache.root_dir", "必須是非空字串")

    transfer = config.get("transfer", {})
    chunk_size_kb = transfer.get("chunk_size_kb")
    if isinstance(chunk_size_kb, bool) or not isinstance(chunk_size_kb, int) or chunk_size_kb <= 0:
        add_error("transfer.chunk_size_kb", "必須是正整數")

    monitor = config.get("monitor", {})
    poll_interval_sec = monitor.get("poll_interval_sec")
    if isinstance(poll_interval_sec, bool) or not isinstance(poll_interval_sec, (int, float)) or poll_interval_sec <= 0:
        add_error("monitor.poll_interval_sec", "必須是大於 0 的數值")
    for key in ("mount_roots", "nested_mount_roots", "darwin_mount_roots"):
        if not _is_str_list(monitor.get(key, [])):
            add_error(f"monitor.{key}", "必須是字串清單")
    drive_letters = monitor.get("drive_letters", "")
    if not isinstance(drive_letters, str) or not all(letter.isalpha() for letter in drive_letters):
        add_error("monitor.drive_letters", "必須只包含英文字母")

    logging_config = config.get("logging", {})
    level = logging_config.get("level", "INFO")
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        add_error("logging.level", "必須是有效的 logging 等級名稱")
    log_file = logging_config.get("file")
    if log_file is not None and (not isinstance(log_file, str) or not log_file.strip()):
        add_error("logging.file", "必須是 null 或非空字串")

    return errors
