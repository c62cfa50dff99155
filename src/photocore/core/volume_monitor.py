"""可移除磁碟監控。

背景執行緒每隔固定秒數列舉一次掛載點，與已知集合比對：新出現的磁碟
若含有 DCIM 目錄且有媒體檔，就送出 CardDetectedEvent；消失的磁碟直接
從集合移除，不送事件。已知集合由監控執行緒修改，讀取與更新都持有同一把鎖。

事件只走一條通道：有 event_callback 時直接呼叫它，否則放進 events 佇列。
"""

from __future__ import annotations

import platform
import queue
import threading
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..config import ConfigManager
from ..models import CardDetectedEvent
from ..utils.logger import get_logger
from .media_scanner import MediaScanner


def _child_dirs(root: Path, logger) -> list[Path]:
    try:
        children = sorted(root.iterdir())
    except OSError as exc:
        logger.debug(f"略過無法讀取的掛載目錄: {root} ({exc})")
        return []

    dirs: list[Path] = []
    for child in children:
        try:
            if child.is_dir():
                dirs.append(child)
        except OSError as exc:
            # 單一掛載點無回應時只略過它本身
            logger.debug(f"略過無法讀取的掛載點: {child} ({exc})")
    return dirs


def enumerate_volumes(config: ConfigManager, system: Optional[str] = None, logger=None) -> List[Path]:
    """列出目前存在的磁碟根目錄。"""
    logger = logger or get_logger("VolumeMonitor")
    system = system or platform.system()
    volumes: list[Path] = []

    if system == "Linux":
        for root in config.get("monitor.nested_mount_roots", []):
            for user_dir in _child_dirs(Path(root), logger):
                volumes.extend(_child_dirs(user_dir, logger))
        for root in config.get("monitor.mount_roots", []):
            volumes.extend(_child_dirs(Path(root), logger))
    elif system == "Darwin":
        for root in config.get("monitor.darwin_mount_roots", []):
            volumes.extend(_child_dirs(Path(root), logger))
    elif system == "Windows":
        for letter in str(config.get("monitor.drive_letters", "")):
            drive = Path(f"{letter.upper()}:\\")
            try:
                if drive.exists():
                    volumes.append(drive)
            except OSError:
                continue

    return list(dict.fromkeys(volumes))


class VolumeMonitor:
    def __init__(
        self,
        config: ConfigManager,
        *,
        enumerator: Optional[Callable[[], Iterable[Path]]] = None,
        scanner: Optional[MediaScanner] = None,
        event_callback: Optional[Callable[[CardDetectedEvent], None]] = None,
        logger=None,
    ) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)
        self.config = config
        self.scanner = scanner or MediaScanner(self.logger)
        self.events: "queue.Queue[CardDetectedEvent]" = queue.Queue()
        self._enumerator = enumerator or (lambda: enumerate_volumes(config, logger=self.logger))
        self._event_callback = event_callback
        self._interval_sec = float(config.get("monitor.poll_interval_sec", 2.0))
        self._known: set[Path] = set()
        self._known_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def known_volumes(self) -> frozenset[Path]:
        with self._known_lock:
            return frozenset(self._known)

    def prime(self) -> None:
        """啟動時先記下已掛載的磁碟，避免誤報為新插入。"""
        volumes = self._enumerate()
        if volumes is not None:
            with self._known_lock:
                self._known.update(volumes)

    def poll_once(self) -> list[CardDetectedEvent]:
        current = self._enumerate()
        if current is None:
            return []

        present = set(current)
        with self._known_lock:
            added = [volume for volume in dict.fromkeys(current) if volume not in self._known]
            removed = sorted(self._known - present)
            self._known.update(added)
            self._known.difference_update(removed)

        for volume in removed:
            self.logger.info(f"VOLUME_REMOVED: {volume}")

        detected: list[CardDetectedEvent] = []
        for volume in added:
            self.logger.info(f"VOLUME_ADDED: {volume}")
            event = self._scan_volume(volume)
            if event is not None:
                detected.append(event)
                self._publish(event)

        return detected

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="VolumeMonitor", daemon=True)
        self._thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None

    def _run(self) -> None:
        self.prime()
        while not self._stop_event.wait(self._interval_sec):
            try:
                self.poll_once()
            except Exception:
                self.logger.exception("磁碟輪詢失敗，下一輪繼續")

    def _enumerate(self) -> Optional[list[Path]]:
        try:
            return list(self._enumerator())
        except OSError as exc:
            self.logger.warning(f"無法列舉磁碟: {exc}")
            return None

    def _scan_volume(self, volume: Path) -> Optional[CardDetectedEvent]:
        dcim_path = self.scanner.find_media_dir(volume)
        if dcim_path is None:
            return None
        files = self.scanner.collect_media_files(dcim_path)
        if not files:
            return None
        self.logger.info(f"CARD_DETECTED: {volume} ({len(files)} 個媒體檔)")
        return CardDetectedEvent.from_scan(volume, dcim_path, files)

    def _publish(self, event: CardDetectedEvent) -> None:
        if self._event_callback is None:
            self.events.put(event)
            return
        try:
            self._event_callback(event)
        except Exception:
            self.logger.exception(f"事件處理失敗: {event.drive}")
