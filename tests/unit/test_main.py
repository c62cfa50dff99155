import json
from pathlib import Path

import pytest

from photocore.main import main


def _write_config(tmp_path: Path, **overrides) -> Path:
    data = {"cache": {"root_dir": str(tmp_path / "cache")}}
    data.update(overrides)
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_import_command_reports_failures(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    project = tmp_path / "project"
    (project / "RAW").mkdir(parents=True)
    (project / "JPG").mkdir(parents=True)
    good = tmp_path / "DSC_0001.NEF"
    good.write_bytes(b"raw")
    bad = tmp_path / "clip.mov"
    bad.write_bytes(b"mov")

    exit_code = main(
        ["--config", str(_write_config(tmp_path)), "import", "--project", str(project), str(good), str(bad)]
    )

    output = capsys.readouterr().out
    assert exit_code == 1
    assert "[1/2] DSC_0001.NEF" in output
    assert "Success: 1, Failed: 1" in output
    assert (project / "RAW" / "DSC_0001.NEF").exists()


def test_thumbnail_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    raw = tmp_path / "DSC_0001.NEF"
    raw.write_bytes(b"\x00" * 10 + b"\xff\xd8" + b"\x01" * 12_000 + b"\xff\xd9")
    jpeg = tmp_path / "photo.jpg"
    jpeg.write_bytes(b"jpeg")
    empty_raw = tmp_path / "empty.dng"
    empty_raw.write_bytes(b"\x00" * 64)

    exit_code = main(
        ["--config", str(_write_config(tmp_path)), "thumbnail", str(raw), str(jpeg), str(empty_raw)]
    )

    lines = capsys.readouterr().out.strip().splitlines()
    assert exit_code == 0
    assert lines[0].startswith(f"{raw}\t{(tmp_path / 'cache').resolve()}")
    assert lines[1] == f"{jpeg}\t{jpeg}"
    assert lines[2] == f"{empty_raw}\t-"


def test_invalid_config_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = _write_config(tmp_path, transfer={"chunk_size_kb": -1})

    exit_code = main(["--config", str(config_path), "scan", str(tmp_path)])

    assert exit_code == 2
    assert "transfer.chunk_size_kb" in capsys.readouterr().err


def test_scan_command_lists_media(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    dcim = tmp_path / "DCIM" / "100CANON"
    dcim.mkdir(parents=True)
    (dcim / "IMG_0001.CR2").write_bytes(b"\x00")
    (dcim / "IMG_0001.THM").write_bytes(b"\x00")

    exit_code = main(["--config", str(_write_config(tmp_path)), "scan", str(tmp_path / "DCIM")])

    assert exit_code == 0
    assert capsys.readouterr().out.strip().splitlines() == [str(dcim / "IMG_0001.CR2")]


def test_malformed_config_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path = tmp_path / "broken.json"
    config_path.write_text("{not json", encoding="utf-8")

    exit_code = main(["--config", str(config_path), "scan", str(tmp_path)])

    assert exit_code == 2
    assert str(config_path) in capsys.readouterr().err


def test_edit_command_copies_into_editados(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    project = tmp_path / "2026_10_17_Session"
    (project / "JPG").mkdir(parents=True)
    photo = project / "JPG" / "DSC_0001.JPG"
    photo.write_bytes(b"jpeg")

    exit_code = main(["edit", str(photo), str(project / "JPG" / "MISSING.JPG")])

    output = capsys.readouterr().out
    assert exit_code == 1
    assert (project / "Editados" / "DSC_0001.JPG").read_bytes() == b"jpeg"
    assert "Success: 1, Failed: 1" in output
