"""Glob search over object storage listings."""

from typing import Iterator, Optional

from opentelemetry.trace import Status, StatusCode

from bucket_glob.core import get_logger, get_tracer
from bucket_glob.core.config import Settings
from bucket_glob.objectstorage import ObjectLister, create_lister
from bucket_glob.pattern import GlobPattern, extract_prefix, parse_path
from bucket_glob.schemas import PathSpec

logger = get_logger(__name__)
tracer = get_tracer(__name__)


def find_matches(spec: PathSpec, lister: ObjectLister) -> Iterator[str]:
    """Yield the keys of a bucket that match the path's glob pattern.

    The pattern is compiled before the listing starts, so an invalid pattern
    fails without contacting the backend. Only keys under the pattern's
    literal prefix are requested; every candidate is then tested against the
    full pattern.

    Args:
        spec: Parsed path naming the bucket and pattern
        lister: Backend lister, already open

    Returns:
        Iterator over matching keys in backend listing order

    Raises:
        PatternError: If the pattern is invalid
        BackendError: If the listing fails
    """
    glob = GlobPattern(spec.pattern)
    prefix = extract_prefix(spec.pattern)

    logger.info(
        "Searching objects",
        bucket=spec.bucket,
        pattern=spec.pattern,
        prefix=prefix,
    )

    # Not made current: the span outlives each yield to the caller
    span = tracer.start_span(
        "bucket_glob.find_matches",
        attributes={
            "bucket_glob.bucket": spec.bucket,
            "bucket_glob.pattern": spec.pattern,
            "bucket_glob.prefix": prefix,
        },
    )
    matched = 0
    try:
        for key in lister.list_keys(spec.bucket, prefix):
            if glob.match(key):
                matched += 1
                yield key
    except Exception as e:
        span.record_exception(e)
        span.set_status(Status(StatusCode.ERROR, str(e)))
        raise
    finally:
        span.set_attribute("bucket_glob.match_count", matched)
        span.end()

    logger.info("Search completed", bucket=spec.bucket, match_count=matched)


def search(
    path: str,
    config: Optional[Settings] = None,
    lister: Optional[ObjectLister] = None,
) -> Iterator[str]:
    """Yield ``scheme://bucket/key`` for every object matching a glob path.

    Args:
        path: Path such as ``gs://bucket/logs/**/*.log``
        config: Settings for the backend client; defaults to the environment
        lister: Lister to use instead of one built for the path's scheme

    Raises:
        InvalidPathError: If the path is malformed
        PatternError: If the pattern is invalid
        BackendError: If the listing fails
    """
    spec = parse_path(path)

    # Clients are created lazily, so a bad pattern still fails before any
    # backend request
    if lister is None:
        lister = create_lister(spec.scheme, config)

    with lister:
        for key in find_matches(spec, lister):
            yield spec.uri(key)
