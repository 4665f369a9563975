"""Parsing of ``scheme://bucket/pattern`` storage paths."""

from bucket_glob.core import get_logger
from bucket_glob.core.exceptions import InvalidPathError
from bucket_glob.schemas import PathSpec

logger = get_logger(__name__)

SUPPORTED_SCHEMES = ("gs", "s3")

# Pattern used when the path names only a bucket
MATCH_ALL = "**"


def parse_path(path: str) -> PathSpec:
    """Split a storage path into scheme, bucket and glob pattern.

    The text after the scheme is split on the first ``/``. Everything before
    it is the bucket; everything after it is the pattern, which is replaced
    by ``**`` when empty so that every key at any depth is listed.

    Args:
        path: Path such as ``gs://bucket/logs/**/*.log``

    Returns:
        PathSpec with scheme, bucket and pattern

    Raises:
        InvalidPathError: If the scheme is unsupported or the bucket is missing
    """
    for scheme in SUPPORTED_SCHEMES:
        marker = f"{scheme}://"
        if path.startswith(marker):
            remainder = path[len(marker) :]
            break
    else:
        expected = " or ".join(f"{s}://" for s in SUPPORTED_SCHEMES)
        raise InvalidPathError(f"Invalid path, must start with {expected}: {path}")

    bucket, _, pattern = remainder.partition("/")
    if not bucket:
        raise InvalidPathError(f"Invalid path, bucket name is missing: {path}")

    spec = PathSpec(scheme=scheme, bucket=bucket, pattern=pattern or MATCH_ALL)
    logger.debug(
        "Path parsed", scheme=spec.scheme, bucket=spec.bucket, pattern=spec.pattern
    )
    return spec
