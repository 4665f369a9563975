"""S3 client configuration and management.

The S3ClientManager creates a boto3 client lazily from the default AWS
credential chain (environment variables, shared config, instance roles) or
from a named profile, and closes it when the manager is released.

S3-Compatible Services:
    Custom endpoints such as MinIO are supported through endpoint_url.
"""

from typing import Any, Dict

import boto3

from bucket_glob.core import get_logger
from bucket_glob.schemas import S3ClientConfig

logger = get_logger(__name__)


class S3ClientManager:
    """Manages a single S3 client connection."""

    def __init__(self, config: S3ClientConfig):
        """Initialize S3 client manager.

        Args:
            config: S3 client configuration
        """
        self.config = config
        self._client = None
        logger.info("S3 client manager initialized", region=config.region_name)

    @property
    def client(self):
        """Get or create S3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create boto3 S3 client with the configured settings."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
        }

        # Add endpoint URL for S3-compatible services
        if self.config.endpoint_url:
            kwargs["endpoint_url"] = self.config.endpoint_url

        if self.config.aws_profile:
            session = boto3.Session(profile_name=self.config.aws_profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info(
                "S3 client created with profile", profile=self.config.aws_profile
            )
        else:
            client = boto3.client("s3", **kwargs)  # type: ignore
            logger.info("S3 client created with default credential chain")

        return client

    def close(self) -> None:
        """Close the client if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("S3 client closed")
