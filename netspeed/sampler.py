import logging
import time
from collections.abc import Callable

from netspeed import counters
from netspeed.data.network_speed import RateResult, Snapshot
from netspeed.rates import calculate_rates
from netspeed.util import output

logger = logging.getLogger(__name__)


class NetworkSpeedSampler:
    """
    Reads the counters every `interval` seconds and emits the aggregate rate
    since the previous successful read.

    The sampler is not started until start() has produced a non-empty
    snapshot. After that each tick either emits one rate record or, when the
    read fails or matches nothing, skips the record and keeps the previous
    snapshot.
    """

    def __init__(
        self,
        selector: Callable[[str], bool],
        interval: int = 1,
        stats_file: str = counters.PROC_NET_DEV,
        sleep: Callable[[float], None] | None = None,
    ):
        if interval < 1:
            raise ValueError(f"interval must be at least 1 second, got {interval}")
        self.selector = selector
        self.interval = interval
        self.stats_file = stats_file
        self._sleep = sleep or time.sleep
        self.previous: Snapshot | None = None

    @property
    def running(self) -> bool:
        return self.previous is not None

    def read(self) -> Snapshot | None:
        snapshot = counters.read_snapshot(selector=self.selector, path=self.stats_file)
        if not snapshot:
            return None
        return snapshot

    def start(self) -> bool:
        snapshot = counters.read_snapshot(selector=self.selector, path=self.stats_file)
        if snapshot is None:
            return False
        if not snapshot:
            output.emit_error(
                label="No interfaces",
                detail=f"No matching interfaces in {self.stats_file}",
            )
            return False

        logger.info(
            f"monitoring {', '.join(s.name for s in snapshot)} every {self.interval}s"
        )
        self.previous = snapshot
        return True

    def tick(self) -> RateResult | None:
        if self.previous is None:
            raise RuntimeError("start() must succeed before tick()")

        self._sleep(self.interval)

        current = self.read()
        if current is None:
            logger.warning("read failed, skipping this tick")
            return None

        result = calculate_rates(
            previous=self.previous, current=current, interval=self.interval
        )
        output.emit(output.rates_record(result))

        self.previous = current
        return result

    def run(self, max_ticks: int | None = None) -> int:
        """
        Tick until max_ticks have run, or forever when it is None. Returns
        the number of records emitted.
        """
        emitted = 0
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if self.tick() is not None:
                emitted += 1
            ticks += 1
        return emitted
