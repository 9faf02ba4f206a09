"""Logging setup for the ledger service."""

import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stdout handler on the root logger.

    Calling this twice replaces the handler instead of
    stacking a second one.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger("bank_ledger").setLevel(log_level)
    # SQL echo is noisy at INFO
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
