"""Google Cloud Storage client management.

Clients authenticate with Application Default Credentials: the file named by
GOOGLE_APPLICATION_CREDENTIALS, gcloud user credentials, or the metadata
server when running on Google Cloud.
"""

from google.cloud import storage

from bucket_glob.core import get_logger
from bucket_glob.schemas import GCSClientConfig

logger = get_logger(__name__)


class GCSClientManager:
    """Manages a single Google Cloud Storage client connection."""

    def __init__(self, config: GCSClientConfig):
        self.config = config
        self._client = None
        logger.info("GCS client manager initialized", project=config.project)

    @property
    def client(self) -> storage.Client:
        """Get or create GCS client instance."""
        if self._client is None:
            self._client = storage.Client(project=self.config.project)
            logger.info("GCS client created with application default credentials")
        return self._client

    def close(self) -> None:
        """Close the client if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("GCS client closed")
