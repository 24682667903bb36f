import logging
import sys


def setup_logging(level: int = logging.INFO):
    """Route all records to stdout with a compact single-line format."""
    logger = logging.getLogger()
    logger.setLevel(level)

    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"
    ))
    logger.addHandler(handler)

    # one line per request is noise at the overlay's poll rate
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
    return logger
