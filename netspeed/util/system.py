import os
from pathlib import Path

import click

SYSFS_NET = "/sys/class/net"


def get_cache_directory() -> Path | None:
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache:
        cache_dir = Path(xdg_cache) / "waybar"
    else:
        cache_dir = Path.home() / ".cache/waybar"

    if not os.path.exists(cache_dir):
        try:
            os.makedirs(cache_dir, mode=0o700)
        except OSError as e:
            # stdout carries status records only
            click.echo(f'Couldn\'t create "{cache_dir}": {e}', err=True)
            return None

    return cache_dir


def interface_exists(interface: str, sysfs_root: str = SYSFS_NET) -> bool:
    """
    Check for the interface's entry in the kernel's device registry.
    """
    return os.path.exists(os.path.join(sysfs_root, interface))
