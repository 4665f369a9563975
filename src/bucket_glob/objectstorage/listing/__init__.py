"""Object storage listing operations."""

from .key_listing import GCSObjectLister, ObjectLister, S3ObjectLister, create_lister

__all__ = ["GCSObjectLister", "ObjectLister", "S3ObjectLister", "create_lister"]
