"""Exception hierarchy for bucket-glob."""


class BucketGlobError(Exception):
    """Base exception for all bucket-glob errors."""

    pass


class InvalidPathError(BucketGlobError):
    """Raised when a storage path has a bad scheme or no bucket."""

    pass


class PatternError(BucketGlobError):
    """Raised when a glob pattern is syntactically invalid."""

    pass


class BackendError(BucketGlobError):
    """Raised when the storage backend fails (auth, network, permission)."""

    pass
