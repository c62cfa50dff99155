"""日誌工具。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
_default_level = logging.INFO
_default_log_file: Optional[Path] = None


def configure_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """設定之後建立的 logger 所使用的等級與檔案。"""
    global _default_level, _default_log_file
    _default_level = logging.getLevelName(level.upper())
    _default_log_file = log_file


def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_default_level)
    formatter = logging.Formatter(_FORMAT)

    log_path = log_file or _default_log_file
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(_default_level)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    return logger
