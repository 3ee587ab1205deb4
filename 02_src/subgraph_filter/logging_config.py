"""Logging setup shared by the CLI and library callers."""

import logging

LOG_FORMAT = "%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure root logging once and return the package logger.

    Unknown level names fall back to WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
    return logging.getLogger("subgraph_filter")
