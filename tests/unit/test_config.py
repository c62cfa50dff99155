import json
from pathlib import Path

import pytest

from photocore.config import ConfigManager
from photocore.exceptions import ConfigError


def test_config_load_defaults() -> None:
    config = ConfigManager()
    assert config.get("cache.root_dir") == "~/.photocore_cache/thumbnails"
    assert config.get("transfer.chunk_size_kb") == 1024
    assert config.get("monitor.poll_interval_sec") == 2.0
    assert "/media" in config.get("monitor.nested_mount_roots")
    assert config.get("monitor.drive_letters").startswith("D")
    assert config.validate_config() == []


def test_user_config_overrides_defaults(tmp_path: Path) -> None:
    user_path = tmp_path / "config.json"
    user_path.write_text(json.dumps({"monitor": {"poll_interval_sec": 5}}), encoding="utf-8")

    config = ConfigManager(user_path)

    assert config.get("monitor.poll_interval_sec") == 5
    assert config.get("monitor.mount_roots") == ["/mnt"]


def test_config_validation() -> None:
    config = ConfigManager()
    config.set("transfer.chunk_size_kb", 0)
    config.set("monitor.drive_letters", "D1")
    config.set("logging.level", "LOUD")

    errors = config.validate_config()

    assert any(error.startswith("transfer.chunk_size_kb") for error in errors)
    assert any(error.startswith("monitor.drive_letters") for error in errors)
    assert any(error.startswith("logging.level") for error in errors)
    with pytest.raises(ConfigError):
        config.ensure_valid()


def test_save_user_config_round_trip(tmp_path: Path) -> None:
    config = ConfigManager()
    config.set("cache.root_dir", str(tmp_path / "thumbs"))
    saved = tmp_path / "nested" / "config.json"

    config.save_user_config(saved)

    assert ConfigManager(saved).get("cache.root_dir") == str(tmp_path / "thumbs")
    assert json.loads(saved.read_text(encoding="utf-8")) == {"cache": {"root_dir": str(tmp_path / "thumbs")}}


def test_malformed_user_config_raises_config_error(tmp_path: Path) -> None:
    user_path = tmp_path / "config.json"
    user_path.write_text('{"monitor": {"poll_interval_sec": 5,}}', encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        ConfigManager(user_path)

    assert str(user_path) in excinfo.value.errors[0]


def test_non_object_user_config_raises_config_error(tmp_path: Path) -> None:
    user_path = tmp_path / "config.json"
    user_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError):
        ConfigManager(user_path)
