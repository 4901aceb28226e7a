import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler = None


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr with timestamps.

    Safe to call more than once; the handler is only installed the first time.
    """
    global _handler
    root = logging.getLogger()
    root.setLevel(level)

    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    if _handler not in root.handlers:
        root.addHandler(_handler)
