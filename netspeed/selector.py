"""
Decide which interfaces count towards the aggregate rate.
"""

import logging
import re
from collections.abc import Iterable
from functools import cache

from netspeed.util import system

logger = logging.getLogger(__name__)

AUTO_PREFIXES = ("eth", "wlan", "enp", "wlp")


@cache
def auto_pattern() -> re.Pattern[str]:
    """
    Physical wired and wireless names. Loopback, bridges, containers and
    tunnels fall outside it.
    """
    return re.compile(rf"^({'|'.join(AUTO_PREFIXES)})")


class InterfaceSelector:
    """
    Matches interface names against an explicit allow-list or, when no list
    was given, against the auto-detect prefixes.
    """

    def __init__(self, allow_list: Iterable[str] | None = None):
        self.allow_list: tuple[str, ...] | None = (
            tuple(allow_list) if allow_list is not None else None
        )

    @property
    def explicit(self) -> bool:
        return self.allow_list is not None

    def __call__(self, name: str) -> bool:
        if self.allow_list is not None:
            return name in self.allow_list
        return auto_pattern().match(name) is not None

    def __repr__(self) -> str:
        if self.allow_list is not None:
            return f"InterfaceSelector(allow_list={list(self.allow_list)})"
        return "InterfaceSelector(auto)"


def validate_interfaces(
    names: Iterable[str], sysfs_root: str = system.SYSFS_NET
) -> str | None:
    """
    Return the first name with no device entry under sysfs_root, or None
    when every interface exists.
    """
    for name in names:
        if not system.interface_exists(interface=name, sysfs_root=sysfs_root):
            logger.debug(f"{name} not found under {sysfs_root}")
            return name
    return None
