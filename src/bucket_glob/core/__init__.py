"""Core utilities and shared components for bucket-glob."""

from .config import Settings, settings
from .exceptions import BackendError, BucketGlobError, InvalidPathError, PatternError
from .observability import get_logger, get_tracer

__all__ = [
    "Settings",
    "settings",
    "BucketGlobError",
    "InvalidPathError",
    "PatternError",
    "BackendError",
    "get_logger",
    "get_tracer",
]
