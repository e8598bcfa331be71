"""Utility modules for pgnlex.

Provides:
- logger: get_logger for logging
"""

from pgnlex.utils.logger import get_logger

__all__ = ["get_logger"]
