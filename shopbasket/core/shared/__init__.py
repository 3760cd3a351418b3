"""
Shared utilities used across the basket core.
"""

from .logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    get_logger,
    get_service_logger,
)
from .validators import sanitize_scalars, strip_tags

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "JSONFormatter",
    "configure_logging",
    "get_logger",
    "get_service_logger",
    "sanitize_scalars",
    "strip_tags",
]
