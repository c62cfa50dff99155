import shutil
from pathlib import Path

from photocore.config import ConfigManager
from photocore.core import TransferEngine, VolumeMonitor, enumerate_volumes, summarize
from photocore.models import TransferErrorCode, TransferProgress


def _make_card(root: Path) -> Path:
    card = root / "media" / "photographer" / "NIKON_D750"
    for folder in ("100NIKON", "101NIKON"):
        (card / "DCIM" / folder).mkdir(parents=True)
    for index in range(6):
        folder = "100NIKON" if index < 3 else "101NIKON"
        (card / "DCIM" / folder / f"DSC_{index:04d}.NEF").write_bytes(b"raw" * 1000)
        (card / "DCIM" / folder / f"DSC_{index:04d}.JPG").write_bytes(b"jpg" * 1000)
    (card / "DCIM" / "100NIKON" / "NIKON001.DSC").write_bytes(b"?")
    return card


def test_detected_card_imports_into_project(tmp_path: Path) -> None:
    config = ConfigManager()
    config.set("monitor.nested_mount_roots", [str(tmp_path / "media")])
    config.set("monitor.mount_roots", [])
    (tmp_path / "media").mkdir()

    monitor = VolumeMonitor(config, enumerator=lambda: enumerate_volumes(config, system="Linux"))
    monitor.prime()
    assert monitor.poll_once() == []

    card = _make_card(tmp_path)
    (event,) = monitor.poll_once()
    assert event.drive == card
    assert event.image_count == 12
    assert len(event.images) == 10

    project = tmp_path / "projects" / "2026_10_17_Ensaio"
    (project / "RAW").mkdir(parents=True)
    (project / "JPG").mkdir(parents=True)
    (project / "JPG" / "DSC_0004.JPG").write_bytes(b"already imported")
    progress: list[TransferProgress] = []

    results = TransferEngine(config).import_from_card(
        event.dcim_path, project, progress_callback=progress.append
    )

    summary = summarize(results)
    assert (summary.total, summary.succeeded, summary.failed) == (12, 11, 1)
    (failed,) = [item for item in results if not item.success]
    assert failed.error_code is TransferErrorCode.ALREADY_EXISTS
    assert failed.source.name == "DSC_0004.JPG"
    assert [event.completed for event in progress] == list(range(1, 12))
    assert len(list((project / "RAW").iterdir())) == 6
    assert (project / "JPG" / "DSC_0004.JPG").read_bytes() == b"already imported"

    shutil.rmtree(card)
    assert monitor.poll_once() == []
    assert card not in monitor.known_volumes
