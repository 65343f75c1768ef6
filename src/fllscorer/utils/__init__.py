"""Utility modules for the scorer."""

from .logger import setup_logger

__all__ = [
    "setup_logger",
]
