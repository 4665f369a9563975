"""Object storage operations for Google Cloud Storage and S3."""

from .clients import GCSClientManager, S3ClientManager
from .listing import GCSObjectLister, ObjectLister, S3ObjectLister, create_lister

__all__ = [
    "GCSClientManager",
    "GCSObjectLister",
    "ObjectLister",
    "S3ClientManager",
    "S3ObjectLister",
    "create_lister",
]
