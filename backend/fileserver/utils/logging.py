import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logger = logging.getLogger("fileserver")


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Safe to call more than once; later calls only adjust the level.
    """
    if not any(getattr(h, "_fileserver", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._fileserver = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
