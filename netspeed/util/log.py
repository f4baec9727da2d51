import logging
import os
from pathlib import Path


class LevelPadFormatter(logging.Formatter):
    LEVEL_WIDTH = len("WARNING")

    def format(self, record):
        level = record.levelname
        pad = " " * (self.LEVEL_WIDTH - len(level))
        record.padded = f"[{level}]{pad}"
        return super().format(record)


def configure(debug: bool, name: str, logfile: Path | None) -> logging.Logger:
    level = logging.DEBUG if debug else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # stdout belongs to waybar, so nothing may reach the root handlers
    logger.propagate = False

    for handler in list(logger.handlers):
        if logfile is not None and isinstance(handler, logging.FileHandler):
            if handler.baseFilename == os.path.abspath(logfile):
                handler.setLevel(level)
                return logger
        elif logfile is None and isinstance(handler, logging.NullHandler):
            return logger
        logger.removeHandler(handler)
        handler.close()

    if logfile is None:
        logger.addHandler(logging.NullHandler())
        return logger

    handler = logging.FileHandler(logfile, mode="a", encoding="utf-8")
    handler.setLevel(level)
    formatter = LevelPadFormatter(
        f"%(asctime)s %(padded)s {name}.%(funcName)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
