DECIMAL_BASE = 1000
U64_MASK = (1 << 64) - 1


def valid_units() -> list[str]:
    """
    Return the SI unit suffixes used for byte counts, smallest first.
    """
    return ["B", "K", "M", "G", "T", "P"]


def human_bytes(number: int = 0) -> str:
    """
    Render a byte count (or a bytes-per-second rate) with a decimal unit
    suffix, e.g. 999 -> "999B", 12345 -> "12.3K".
    """
    units = valid_units()
    if number < DECIMAL_BASE:
        return f"{number}{units[0]}"

    value = float(number)
    unit_index = 0
    while value >= DECIMAL_BASE and unit_index < len(units) - 1:
        value = value / 1000.0
        unit_index += 1

    return f"{value:.1f}{units[unit_index]}"


def to_u64(number: int) -> int:
    """
    Wrap an integer into the unsigned 64-bit range the kernel counters use.
    """
    return number & U64_MASK
