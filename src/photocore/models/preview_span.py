"""RAW 檔內嵌預覽的位元組區間。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PreviewSpan:
    start: int
    end: int  # 不含，已包含 EOI 兩個位元組

    @property
    def size(self) -> int:
        return self.end - self.start
