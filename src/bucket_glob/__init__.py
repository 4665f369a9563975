"""List cloud storage objects whose keys match a glob pattern.

This package lists the keys of a Google Cloud Storage or S3 bucket, narrows
the listing to the literal prefix of a glob pattern, and filters the results
client-side with ``**``-aware matching.

Recommended Usage:
    >>> from bucket_glob import search
    >>> for uri in search("gs://my-bucket/logs/**/*.log"):
    ...     print(uri)

Advanced Usage:
    Use the pattern helpers on their own:

    >>> from bucket_glob.pattern import GlobPattern, extract_prefix
    >>> GlobPattern("**/*.csv").match("sub/dir/data.csv")
    True
    >>> extract_prefix("logs/**/*.txt")
    'logs/'
"""

__version__ = "0.1.0"

from .core.exceptions import (
    BackendError,
    BucketGlobError,
    InvalidPathError,
    PatternError,
)
from .objectstorage import GCSObjectLister, ObjectLister, S3ObjectLister, create_lister
from .pattern import GlobPattern, extract_prefix, match, parse_path
from .schemas import GCSClientConfig, PathSpec, S3ClientConfig
from .unified import find_matches, search

__all__ = [
    # Errors
    "BucketGlobError",
    "InvalidPathError",
    "PatternError",
    "BackendError",
    # Schemas
    "PathSpec",
    "GCSClientConfig",
    "S3ClientConfig",
    # Patterns
    "GlobPattern",
    "extract_prefix",
    "match",
    "parse_path",
    # Listing
    "GCSObjectLister",
    "ObjectLister",
    "S3ObjectLister",
    "create_lister",
    # Search
    "find_matches",
    "search",
]
