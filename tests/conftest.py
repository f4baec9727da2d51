from pathlib import Path

import pytest


@pytest.fixture
def stats_file(tmp_path: Path) -> Path:
    return tmp_path / "net_dev"


@pytest.fixture
def sysfs_root(tmp_path: Path) -> Path:
    root = tmp_path / "sys" / "class" / "net"
    for name in ("lo", "eth0", "wlan0"):
        (root / name).mkdir(parents=True)
    return root
