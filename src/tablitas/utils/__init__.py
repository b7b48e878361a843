"""Utility modules for Tablitas.

Provides:
- logger: get_logger for namespaced logging, configure_logging for the CLI
"""

from tablitas.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
