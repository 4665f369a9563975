"""Storage path parsing, prefix extraction and glob matching."""

from .matcher import GlobPattern, match, translate
from .parser import MATCH_ALL, SUPPORTED_SCHEMES, parse_path
from .prefix import extract_prefix

__all__ = [
    "GlobPattern",
    "MATCH_ALL",
    "SUPPORTED_SCHEMES",
    "extract_prefix",
    "match",
    "parse_path",
    "translate",
]
