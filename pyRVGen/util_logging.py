import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger for scripts; library modules only log at DEBUG."""
    logger = logging.getLogger("pyRVGen")
    logger.setLevel(level)
    logger.propagate = False

    for h in list(logger.handlers):
        logger.removeHandler(h)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s - %(message)s",
                                      datefmt="%H:%M:%S"))
    logger.addHandler(ch)
    logger.debug("Logger initialized.")
    return logger
