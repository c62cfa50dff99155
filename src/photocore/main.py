from __future__ import annotations

import argparse
import json
import queue
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import MediaScanner, ThumbnailCache, TransferEngine, VolumeMonitor, summarize
from .exceptions import ConfigError
from .models import TransferProgress, TransferResult
from .utils.logger import configure_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    print(f"photocore v{__version__}", file=sys.stderr)
    try:
        config = ConfigManager(Path(args.config) if args.config else None)
        config.ensure_valid()
    except ConfigError as exc:
        for error in exc.errors:
            print(f"Config error: {error}", file=sys.stderr)
        return 2

    log_file = config.get("logging.file")
    configure_logging(
        str(config.get("logging.level", "INFO")),
        Path(log_file).expanduser() if log_file else None,
    )

    if args.command == "thumbnail":
        return _run_thumbnail(args, config)
    if args.command == "import":
        return _run_import(args, config)
    if args.command == "import-card":
        return _run_import_card(args, config)
    if args.command == "scan":
        return _run_scan(args)
    if args.command == "edit":
        return _run_edit(args, config)
    if args.command == "watch":
        return _run_watch(config)
    parser.print_help()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="photocore")
    parser.add_argument("--config", help="Path to config file", default=None)

    subparsers = parser.add_subparsers(dest="command")

    thumbnail = subparsers.add_parser("thumbnail", help="Print a displayable path per file")
    thumbnail.add_argument("paths", nargs="+", help="Image or RAW files")

    import_files = subparsers.add_parser("import", help="Copy files into a project")
    import_files.add_argument("--project", required=True, help="Project folder")
    import_files.add_argument("files", nargs="+", help="Files to import")

    import_card = subparsers.add_parser("import-card", help="Copy a whole card into a project")
    import_card.add_argument("--project", required=True, help="Project folder")
    import_card.add_argument("--dcim", required=True, help="DCIM folder on the card")

    scan = subparsers.add_parser("scan", help="List media files under a folder")
    scan.add_argument("root", help="Folder to scan")

    edit = subparsers.add_parser("edit", help="Copy project files into Editados")
    edit.add_argument("files", nargs="+", help="Files inside a project's RAW or JPG folder")

    subparsers.add_parser("watch", help="Report memory cards as they are inserted")

    return parser


def _print_progress(event: TransferProgress) -> None:
    print(f"[{event.completed}/{event.total}] {event.current_file}")


def _report_results(results: list[TransferResult]) -> int:
    for result in results:
        if not result.success:
            print(f"FAILED {result.source}: {result.error_message}")
    summary = summarize(results)
    print(f"Import done. Success: {summary.succeeded}, Failed: {summary.failed}")
    return 1 if summary.failed else 0


def _run_thumbnail(args: argparse.Namespace, config: ConfigManager) -> int:
    cache = ThumbnailCache(config)
    for value in args.paths:
        display_path = cache.resolve_display_path(Path(value))
        print(f"{value}\t{display_path if display_path is not None else '-'}")
    return 0


def _run_import(args: argparse.Namespace, config: ConfigManager) -> int:
    engine = TransferEngine(config)
    results = engine.transfer(
        [Path(value) for value in args.files],
        Path(args.project),
        progress_callback=_print_progress,
    )
    return _report_results(results)


def _run_import_card(args: argparse.Namespace, config: ConfigManager) -> int:
    engine = TransferEngine(config)
    results = engine.import_from_card(
        Path(args.dcim),
        Path(args.project),
        progress_callback=_print_progress,
    )
    return _report_results(results)


def _run_scan(args: argparse.Namespace) -> int:
    for path in MediaScanner().collect_media_files(Path(args.root)):
        print(path)
    return 0


def _run_edit(args: argparse.Namespace, config: ConfigManager) -> int:
    engine = TransferEngine(config)
    results = []
    for value in args.files:
        result = engine.copy_to_edited(Path(value))
        if result.success:
            print(f"{value} -> {result.destination}")
        results.append(result)
    return _report_results(results)


def _run_watch(config: ConfigManager) -> int:
    monitor = VolumeMonitor(config)
    monitor.start()
    print("Watching for memory cards. Press Ctrl+C to stop.", file=sys.stderr)
    try:
        while True:
            try:
                event = monitor.events.get(timeout=0.5)
            except queue.Empty:
                continue
            print(json.dumps(event.to_dict(), ensure_ascii=False), flush=True)
    except KeyboardInterrupt:
        pass
    finally:
        monitor.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
