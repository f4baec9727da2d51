from dataclasses import dataclass, field

MAX_INTERFACES = 32
MAX_NAME_LEN = 15


@dataclass
class InterfaceSample:
    name: str = ""
    rx_bytes: int = 0
    tx_bytes: int = 0


@dataclass
class Snapshot:
    """
    The counters of every selected interface, captured in one read.
    """

    samples: dict[str, InterfaceSample] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples.values())

    def get(self, name: str) -> InterfaceSample | None:
        return self.samples.get(name)

    def is_full(self) -> bool:
        return len(self.samples) >= MAX_INTERFACES

    def add(self, sample: InterfaceSample) -> bool:
        """
        Add a sample, keeping the first one seen for a name. Returns False
        when the sample was not stored.
        """
        if self.is_full() or sample.name in self.samples:
            return False
        self.samples[sample.name] = sample
        return True


@dataclass
class RateResult:
    rx_rate: int = 0
    tx_rate: int = 0
