"""Console logging for Fantasy MVP."""

import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Send the 'fantasy_mvp' logger tree to stderr.

    stdout is left to the ranked table and config listing, so the CLI's
    output can be piped without log lines mixed in.

    Returns:
        Configured 'fantasy_mvp' logger
    """
    logger = logging.getLogger('fantasy_mvp')
    logger.setLevel(level)
    logger.handlers = []

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(handler)
    return logger


def get_logger(name: str = 'fantasy_mvp') -> logging.Logger:
    """Get a logger instance (a child of 'fantasy_mvp' for module loggers)."""
    return logging.getLogger(name)
