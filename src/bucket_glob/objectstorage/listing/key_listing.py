"""Prefix-scoped key listing for object storage backends.

Listers are context managers: the backend client is created on first use and
closed when the ``with`` block exits, whether it ends normally or by error.
Each ``list_keys`` call starts a new paginated listing and yields keys lazily
in the order the backend returns them.
"""

from typing import Iterator, Optional, Protocol

from bucket_glob.core import get_logger
from bucket_glob.core.config import Settings
from bucket_glob.core.exceptions import BackendError, InvalidPathError
from bucket_glob.objectstorage.clients import GCSClientManager, S3ClientManager
from bucket_glob.schemas import GCSClientConfig, S3ClientConfig

logger = get_logger(__name__)


class ObjectLister(Protocol):
    """Protocol for listing the keys of a bucket under a prefix."""

    def list_keys(self, bucket: str, prefix: str = "") -> Iterator[str]:
        """Yield every key in the bucket that starts with prefix."""
        ...

    def close(self) -> None:
        """Release the backend connection."""
        ...

    def __enter__(self) -> "ObjectLister": ...

    def __exit__(self, exc_type, exc_value, traceback) -> None: ...


class _ClosingLister:
    """Context manager support shared by the concrete listers."""

    def close(self) -> None:
        self.client_manager.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class GCSObjectLister(_ClosingLister):
    """Lists object names in a Google Cloud Storage bucket."""

    def __init__(self, config: GCSClientConfig):
        self.client_manager = GCSClientManager(config)

    def list_keys(self, bucket: str, prefix: str = "") -> Iterator[str]:
        """Yield blob names under a prefix.

        Args:
            bucket: Bucket name
            prefix: Literal key prefix used to narrow the listing

        Raises:
            BackendError: If the client cannot be created or a page request fails
        """
        logger.info("Listing GCS objects", bucket=bucket, prefix=prefix)

        count = 0
        try:
            blobs = self.client_manager.client.list_blobs(bucket, prefix=prefix)
            for blob in blobs:
                count += 1
                yield blob.name
        except Exception as e:
            error_msg = f"Failed to list objects in gs://{bucket}/{prefix}: {e}"
            logger.debug(error_msg, error=str(e))
            raise BackendError(error_msg) from e

        logger.info(
            "GCS objects listed", bucket=bucket, prefix=prefix, object_count=count
        )


class S3ObjectLister(_ClosingLister):
    """Lists object keys in an S3 bucket."""

    def __init__(self, config: S3ClientConfig):
        self.client_manager = S3ClientManager(config)

    def list_keys(self, bucket: str, prefix: str = "") -> Iterator[str]:
        """Yield object keys under a prefix.

        Args:
            bucket: Bucket name
            prefix: Literal key prefix used to narrow the listing

        Raises:
            BackendError: If the client cannot be created or a page request fails
        """
        logger.info("Listing S3 objects", bucket=bucket, prefix=prefix)

        count = 0
        try:
            # Use paginator to handle large numbers of objects
            paginator = self.client_manager.client.get_paginator("list_objects_v2")
            page_iterator = paginator.paginate(Bucket=bucket, Prefix=prefix)

            for page in page_iterator:
                for obj in page.get("Contents", []):
                    count += 1
                    yield obj["Key"]
        except Exception as e:
            error_msg = f"Failed to list objects in s3://{bucket}/{prefix}: {e}"
            logger.debug(error_msg, error=str(e))
            raise BackendError(error_msg) from e

        logger.info(
            "S3 objects listed", bucket=bucket, prefix=prefix, object_count=count
        )


def create_lister(scheme: str, config: Optional[Settings] = None) -> ObjectLister:
    """Create the lister that serves a path scheme.

    Args:
        scheme: Path scheme, "gs" or "s3"
        config: Settings to build the client from; defaults to the environment

    Raises:
        InvalidPathError: If no backend serves the scheme
    """
    if config is None:
        config = Settings()

    if scheme == "gs":
        return GCSObjectLister(GCSClientConfig(project=config.gcs_project))

    elif scheme == "s3":
        return S3ObjectLister(
            S3ClientConfig(
                region_name=config.s3_region_name,
                endpoint_url=config.s3_endpoint_url,
                aws_profile=config.aws_profile,
            )
        )

    else:
        raise InvalidPathError(f"No storage backend for scheme: {scheme}")
