import logging
import sys

from diagram_engine.config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route engine logs to stdout with a timestamped format."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    # Per-request access lines from uvicorn are not useful at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
