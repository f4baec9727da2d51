import logging

from netspeed.data.network_speed import RateResult, Snapshot
from netspeed.util.conversion import to_u64

logger = logging.getLogger(__name__)


def calculate_rates(previous: Snapshot, current: Snapshot, interval: int) -> RateResult:
    """
    Sum the per-second byte rates of every interface present in both
    snapshots. Interfaces only in the current snapshot add nothing.

    Counters are unsigned 64-bit, so a counter that went backwards (interface
    reset) wraps to a huge rate instead of going negative.
    """
    if interval < 1:
        raise ValueError(f"interval must be at least 1 second, got {interval}")

    rx_total = 0
    tx_total = 0
    for sample in current:
        before = previous.get(sample.name)
        if before is None:
            logger.debug(f"{sample.name} is new, no rate this interval")
            continue

        rx_rate = to_u64(sample.rx_bytes - before.rx_bytes) // interval
        tx_rate = to_u64(sample.tx_bytes - before.tx_bytes) // interval

        rx_total = to_u64(rx_total + rx_rate)
        tx_total = to_u64(tx_total + tx_rate)

    return RateResult(rx_rate=rx_total, tx_rate=tx_total)
