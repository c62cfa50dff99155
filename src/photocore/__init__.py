"""photocore：相機記憶卡匯入與 RAW 預覽核心。"""

__version__ = "0.1.0"
