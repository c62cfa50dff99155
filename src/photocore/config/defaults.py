"""預設設定值。"""

DEFAULT_CONFIG = {
    "cache": {
        "root_dir": "~/.photocore_cache/thumbnails",
    },
    "transfer": {
        "chunk_size_kb": 1024,
    },
    "monitor": {
        "poll_interval_sec": 2.0,
        "mount_roots": ["/mnt"],
        "nested_mount_roots": ["/media", "/run/media"],
        "darwin_mount_roots": ["/Volumes"],
        "drive_letters": "DEFGHIJKLMNOPQRSTUVWXYZ",
    },
    "logging": {
        "level": "INFO",
        "file": None,
    },
}
