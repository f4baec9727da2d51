import json
import logging

from netspeed import glyphs
from netspeed.data.network_speed import RateResult
from netspeed.util import conversion

logger = logging.getLogger(__name__)


def rates_record(result: RateResult) -> dict[str, str]:
    rx = conversion.human_bytes(result.rx_rate)
    tx = conversion.human_bytes(result.tx_rate)
    return {"text": f"{rx:>4}  {tx:>4} "}


def error_record(label: str, detail: str) -> dict[str, str]:
    return {
        "text": f"{glyphs.warning} {label}",
        "tooltip": detail,
        "class": "error",
    }


def emit(record: dict[str, str]):
    """
    Write one status record to stdout as a single JSON line and flush it so
    Waybar picks it up right away.
    """
    line = json.dumps(record, ensure_ascii=False)
    logger.debug(f"emitting {line}")
    print(line, flush=True)


def emit_error(label: str, detail: str):
    logger.error(f"{label}: {detail}")
    emit(error_record(label=label, detail=detail))
