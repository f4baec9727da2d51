"""
Read per-interface byte counters from /proc/net/dev.

The table has two header lines followed by one row per interface:

    eth0: 1234 56 0 0 0 0 0 0 5678 43 0 0 0 0 0 0

Field 1 after the colon is received bytes and field 9 is transmitted bytes.
"""

import logging
from collections.abc import Callable, Iterable

from dacite import Config, from_dict

from netspeed.data.network_speed import MAX_NAME_LEN, InterfaceSample, Snapshot
from netspeed.util import conversion, output

logger = logging.getLogger(__name__)

PROC_NET_DEV = "/proc/net/dev"
FIELD_COUNT = 16
HEADER_LINES = 2
RX_BYTES_FIELD = 0
TX_BYTES_FIELD = 8


def parse_line(line: str) -> InterfaceSample | None:
    """
    Parse one interface row. Returns None for rows without a colon or with
    fewer than 16 numeric fields.
    """
    if ":" not in line:
        return None

    name, data = line.split(":", 1)
    return parse_fields(name=name.strip(), data=data)


def parse_fields(name: str, data: str) -> InterfaceSample | None:
    fields = data.split()[:FIELD_COUNT]
    if len(fields) < FIELD_COUNT:
        return None

    try:
        values = [conversion.to_u64(int(x)) for x in fields]
    except ValueError:
        return None

    return from_dict(
        data_class=InterfaceSample,
        data={
            "name": name[:MAX_NAME_LEN],
            "rx_bytes": values[RX_BYTES_FIELD],
            "tx_bytes": values[TX_BYTES_FIELD],
        },
        config=Config(strict=True),
    )


def parse_stats(lines: Iterable[str], selector: Callable[[str], bool]) -> Snapshot:
    snapshot = Snapshot()
    for lineno, line in enumerate(lines):
        if lineno < HEADER_LINES:
            continue
        if snapshot.is_full():
            logger.debug("snapshot is full, ignoring remaining interfaces")
            break
        if ":" not in line:
            continue

        name, data = line.split(":", 1)
        name = name.strip()
        if not selector(name):
            continue

        sample = parse_fields(name=name, data=data)
        if sample is None:
            logger.debug(f"skipping malformed row for {name}")
            continue

        snapshot.add(sample)

    return snapshot


def read_snapshot(
    selector: Callable[[str], bool], path: str = PROC_NET_DEV
) -> Snapshot | None:
    """
    Read the counters of every selected interface. Emits an error record and
    returns None when the statistics file cannot be read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            snapshot = parse_stats(lines=fh, selector=selector)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"failed to read {path}: {e}")
        output.emit_error(label="Error", detail=f"Cannot open {path}")
        return None

    logger.debug(f"read {len(snapshot)} interface(s) from {path}")
    return snapshot
