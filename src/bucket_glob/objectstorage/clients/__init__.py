"""Object storage client management."""

from .gcs_client import GCSClientManager
from .s3_client import S3ClientManager

__all__ = ["GCSClientManager", "S3ClientManager"]
