"""媒體檔案類型分類。"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

RAW_EXTENSIONS = frozenset({".nef", ".raw", ".cr2", ".arw", ".dng"})
JPEG_EXTENSIONS = frozenset({".jpg", ".jpeg"})
MEDIA_EXTENSIONS = RAW_EXTENSIONS | JPEG_EXTENSIONS
RENDERABLE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})

RAW_FOLDER = "RAW"
JPEG_FOLDER = "JPG"
EDITED_FOLDER = "Editados"
PROJECT_FOLDERS = (RAW_FOLDER, JPEG_FOLDER, EDITED_FOLDER)


def extension_of(path: Path) -> str:
    return path.suffix.lower()


def is_raw_file(path: Path) -> bool:
    return extension_of(path) in RAW_EXTENSIONS


def is_media_file(path: Path) -> bool:
    return extension_of(path) in MEDIA_EXTENSIONS


def is_renderable(path: Path) -> bool:
    return extension_of(path) in RENDERABLE_EXTENSIONS


def destination_folder(path: Path) -> Optional[str]:
    """回傳專案內的目的子資料夾名稱；不支援的格式回傳 None。"""
    ext = extension_of(path)
    if ext in RAW_EXTENSIONS:
        return RAW_FOLDER
    if ext in JPEG_EXTENSIONS:
        return JPEG_FOLDER
    return None
