"""Test configuration and fixtures for bucket-glob."""

import pytest

from bucket_glob.core.exceptions import BackendError


class FakeLister:
    """In-memory lister that records how it was used."""

    def __init__(self, keys, error=None):
        self.keys = list(keys)
        self.error = error
        self.calls = []
        self.closed = False

    def list_keys(self, bucket, prefix=""):
        self.calls.append((bucket, prefix))
        for key in self.keys:
            if key.startswith(prefix):
                yield key
        if self.error is not None:
            raise self.error

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


@pytest.fixture
def sample_keys():
    """Keys of a small bucket with nested objects."""
    return ["a.csv", "b/a.csv", "b/c.txt"]


@pytest.fixture
def fake_lister(sample_keys):
    """Lister serving the sample keys."""
    return FakeLister(sample_keys)


@pytest.fixture
def failing_lister(sample_keys):
    """Lister that fails after serving the sample keys."""
    return FakeLister(sample_keys, error=BackendError("permission denied"))


@pytest.fixture
def make_lister():
    """Factory for listers serving arbitrary keys."""
    return FakeLister
