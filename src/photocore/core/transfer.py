"""Copy media files into a project folder."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from ..config import ConfigManager
from ..models import TransferErrorCode, TransferProgress, TransferResult, TransferSummary
from ..utils import file_classifier, file_ops
from ..utils.cancel import CancelledError, CancellationToken
from ..utils.logger import get_logger
from .media_scanner import MediaScanner

ProgressCallback = Callable[[TransferProgress], None]


def summarize(results: Iterable[TransferResult]) -> TransferSummary:
    return TransferSummary.from_results(results)


class TransferEngine:
    def __init__(
        self,
        config: ConfigManager | None = None,
        logger=None,
        scanner: Optional[MediaScanner] = None,
    ) -> None:
        self.logger = logger or get_logger(self.__class__.__name__)
        self.config = config or ConfigManager()
        self.scanner = scanner or MediaScanner(self.logger)
        self.chunk_size_kb = int(self.config.get("transfer.chunk_size_kb", 1024))

    def transfer(
        self,
        source_paths: Iterable[Path],
        destination_root: Path,
        *,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> list[TransferResult]:
        """依輸入順序逐一複製，每個檔案都會得到一筆結果。

        單一檔案失敗不會中斷批次；進度只在成功時前進。
        """
        sources = [Path(item) for item in source_paths]
        total = len(sources)
        completed = 0
        results: list[TransferResult] = []

        for source in sources:
            if cancel_token is not None and cancel_token.is_cancelled():
                results.append(
                    TransferResult.failed(source, TransferErrorCode.CANCELLED, "已取消")
                )
                continue

            result = self._transfer_one(source, destination_root, cancel_token)
            results.append(result)
            if not result.success:
                self.logger.warning(f"{result.error_code.value}: {source} ({result.error_message})")
                continue

            completed += 1
            self._emit(progress_callback, TransferProgress(completed, total, source.name))

        summary = summarize(results)
        self.logger.info(f"匯入完成：成功 {summary.succeeded}，失敗 {summary.failed}")
        return results

    def import_from_card(
        self,
        dcim_path: Path,
        destination_root: Path,
        *,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> list[TransferResult]:
        files = self.scanner.collect_media_files(dcim_path)
        self.logger.info(f"從記憶卡匯入 {len(files)} 個檔案: {dcim_path}")
        return self.transfer(
            files,
            destination_root,
            progress_callback=progress_callback,
            cancel_token=cancel_token,
        )

    def copy_to_edited(
        self,
        path: Path,
        *,
        cancel_token: Optional[CancellationToken] = None,
    ) -> TransferResult:
        """把專案內 RAW/ 或 JPG/ 的檔案複製到同一專案的 Editados/。"""
        source = Path(path)
        edited_dir = source.parent.parent / file_classifier.EDITED_FOLDER
        try:
            edited_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self.logger.warning(f"無法建立資料夾: {edited_dir} ({exc})")
            return TransferResult.failed(source, TransferErrorCode.IO_ERROR, str(exc))

        result = self._copy_into(source, edited_dir / source.name, cancel_token)
        if result.success:
            self.logger.info(f"EDITED_COPY: {source} -> {result.destination}")
        else:
            self.logger.warning(f"{result.error_code.value}: {source} ({result.error_message})")
        return result

    def _transfer_one(
        self,
        source: Path,
        destination_root: Path,
        cancel_token: Optional[CancellationToken],
    ) -> TransferResult:
        folder = file_classifier.destination_folder(source)
        if folder is None:
            return TransferResult.failed(
                source, TransferErrorCode.UNSUPPORTED_FORMAT, f"不支援的格式: {source.suffix}"
            )
        return self._copy_into(source, destination_root / folder / source.name, cancel_token)

    def _copy_into(
        self,
        source: Path,
        destination: Path,
        cancel_token: Optional[CancellationToken],
    ) -> TransferResult:
        try:
            if destination.exists():
                return TransferResult.failed(source, TransferErrorCode.ALREADY_EXISTS, "檔案已存在")
            file_ops.chunked_copy(
                source,
                destination,
                chunk_size_kb=self.chunk_size_kb,
                cancel_token=cancel_token,
            )
        except FileExistsError:
            return TransferResult.failed(source, TransferErrorCode.ALREADY_EXISTS, "檔案已存在")
        except CancelledError as exc:
            return TransferResult.failed(source, TransferErrorCode.CANCELLED, str(exc))
        except OSError as exc:
            return TransferResult.failed(source, TransferErrorCode.IO_ERROR, str(exc))
        return TransferResult.ok(source, destination)

    def _emit(self, callback: Optional[ProgressCallback], event: TransferProgress) -> None:
        if callback is None:
            return
        try:
            callback(event)
        except Exception:
            self.logger.exception(f"進度通知失敗: {event.current_file}")
