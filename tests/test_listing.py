"""Tests for object storage key listing."""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import boto3
import pytest
from google.api_core.exceptions import Forbidden, NotFound
from google.auth.exceptions import DefaultCredentialsError
from moto import mock_aws

from bucket_glob.core.config import Settings
from bucket_glob.core.exceptions import BackendError, InvalidPathError
from bucket_glob.objectstorage import (
    GCSObjectLister,
    S3ObjectLister,
    create_lister,
)
from bucket_glob.schemas import GCSClientConfig, S3ClientConfig


def _blobs(*names):
    return [SimpleNamespace(name=name) for name in names]


class TestGCSObjectLister:
    """Test GCS listing with a mocked storage client."""

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_list_keys(self, mock_client_cls):
        """Test blob names are yielded in listing order."""
        mock_client = mock_client_cls.return_value
        mock_client.list_blobs.return_value = iter(_blobs("logs/a.txt", "logs/b/c.txt"))

        lister = GCSObjectLister(GCSClientConfig(project="my-project"))
        keys = list(lister.list_keys("my-bucket", "logs/"))

        assert keys == ["logs/a.txt", "logs/b/c.txt"]
        mock_client_cls.assert_called_once_with(project="my-project")
        mock_client.list_blobs.assert_called_once_with("my-bucket", prefix="logs/")

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_list_keys_is_lazy(self, mock_client_cls):
        """Test no request is made until the keys are consumed."""
        lister = GCSObjectLister(GCSClientConfig())
        keys = lister.list_keys("my-bucket", "")

        mock_client_cls.assert_not_called()
        mock_client_cls.return_value.list_blobs.return_value = iter(_blobs("a"))
        assert list(keys) == ["a"]

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_client_reused_across_listings(self, mock_client_cls):
        """Test one client serves repeated listings."""
        mock_client_cls.return_value.list_blobs.side_effect = lambda *a, **k: iter(
            _blobs("a")
        )

        lister = GCSObjectLister(GCSClientConfig())
        assert list(lister.list_keys("b1")) == ["a"]
        assert list(lister.list_keys("b1")) == ["a"]

        mock_client_cls.assert_called_once()

    @pytest.mark.parametrize(
        "error", [NotFound("bucket not found"), Forbidden("permission denied")]
    )
    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_api_errors_become_backend_errors(self, mock_client_cls, error):
        """Test API failures are raised as BackendError."""
        mock_client_cls.return_value.list_blobs.side_effect = error

        lister = GCSObjectLister(GCSClientConfig())
        with pytest.raises(BackendError, match="Failed to list objects in gs://b/p"):
            list(lister.list_keys("b", "p"))

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_error_during_pagination(self, mock_client_cls):
        """Test a failing page stops iteration with BackendError."""

        def pages():
            yield SimpleNamespace(name="first")
            raise Forbidden("permission denied")

        mock_client_cls.return_value.list_blobs.return_value = pages()

        lister = GCSObjectLister(GCSClientConfig())
        keys = lister.list_keys("b")

        assert next(keys) == "first"
        with pytest.raises(BackendError, match="permission denied"):
            next(keys)

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_missing_credentials(self, mock_client_cls):
        """Test credential discovery failures are raised as BackendError."""
        mock_client_cls.side_effect = DefaultCredentialsError("no credentials")

        lister = GCSObjectLister(GCSClientConfig())
        with pytest.raises(BackendError, match="no credentials"):
            list(lister.list_keys("b"))

    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_context_manager_closes_client(self, mock_client_cls):
        """Test leaving the with block closes the client."""
        mock_client_cls.return_value.list_blobs.return_value = iter(_blobs("a"))

        with GCSObjectLister(GCSClientConfig()) as lister:
            list(lister.list_keys("b"))

        mock_client_cls.return_value.close.assert_called_once()

    def test_close_without_client(self):
        """Test closing before any listing is a no-op."""
        lister = GCSObjectLister(GCSClientConfig())
        lister.close()

        assert lister.client_manager._client is None


@mock_aws
class TestS3ObjectLister:
    """Test S3 listing with mocked S3."""

    def setup_method(self, method):
        """Set up test environment."""

        self.s3_client = boto3.client(
            "s3",
            aws_access_key_id="test_key",
            aws_secret_access_key="test_secret",
            region_name="us-east-1",
        )
        self.s3_client.create_bucket(Bucket="test-bucket")

        for key in ["a.csv", "b/a.csv", "b/c.txt"]:
            self.s3_client.put_object(Bucket="test-bucket", Key=key, Body=b"x")

        self.config = S3ClientConfig(region_name="us-east-1")

    def test_list_all_keys(self):
        """Test every key is listed without a prefix."""
        with S3ObjectLister(self.config) as lister:
            keys = list(lister.list_keys("test-bucket"))

        assert keys == ["a.csv", "b/a.csv", "b/c.txt"]

    def test_list_keys_under_prefix(self):
        """Test the prefix narrows the listing."""
        with S3ObjectLister(self.config) as lister:
            keys = list(lister.list_keys("test-bucket", "b/"))

        assert keys == ["b/a.csv", "b/c.txt"]

    def test_list_empty_prefix_result(self):
        """Test an unmatched prefix yields nothing."""
        with S3ObjectLister(self.config) as lister:
            keys = list(lister.list_keys("test-bucket", "nonexistent/"))

        assert keys == []

    def test_list_paginates(self):
        """Test listings spanning several pages are complete."""
        for i in range(1005):
            self.s3_client.put_object(
                Bucket="test-bucket", Key=f"many/{i:04d}.txt", Body=b""
            )

        with S3ObjectLister(self.config) as lister:
            keys = list(lister.list_keys("test-bucket", "many/"))

        assert len(keys) == 1005
        assert keys[0] == "many/0000.txt"
        assert keys[-1] == "many/1004.txt"

    def test_missing_bucket(self):
        """Test a missing bucket is raised as BackendError."""
        with S3ObjectLister(self.config) as lister:
            with pytest.raises(BackendError, match="s3://no-such-bucket/"):
                list(lister.list_keys("no-such-bucket"))

    def test_context_manager_closes_client(self):
        """Test leaving the with block releases the client."""
        with S3ObjectLister(self.config) as lister:
            list(lister.list_keys("test-bucket"))
            assert lister.client_manager._client is not None

        assert lister.client_manager._client is None


class TestCreateLister:
    """Test backend selection by scheme."""

    def test_gcs_lister(self):
        """Test gs paths get a GCS lister with the configured project."""
        lister = create_lister("gs", Settings(gcs_project="my-project"))

        assert isinstance(lister, GCSObjectLister)
        assert lister.client_manager.config.project == "my-project"

    def test_s3_lister(self):
        """Test s3 paths get an S3 lister with the configured client settings."""
        lister = create_lister(
            "s3",
            Settings(
                s3_region_name="eu-west-1",
                s3_endpoint_url="http://localhost:9000",
                aws_profile="minio",
            ),
        )

        assert isinstance(lister, S3ObjectLister)
        assert lister.client_manager.config == S3ClientConfig(
            region_name="eu-west-1",
            endpoint_url="http://localhost:9000",
            aws_profile="minio",
        )

    def test_unknown_scheme(self):
        """Test an unsupported scheme is rejected."""
        with pytest.raises(InvalidPathError, match="No storage backend"):
            create_lister("ftp", Settings())

    @patch("bucket_glob.objectstorage.listing.key_listing.Settings")
    def test_defaults_to_environment_settings(self, mock_settings_cls):
        """Test settings are read from the environment when not given."""
        mock_settings_cls.return_value = Mock(gcs_project="env-project")

        lister = create_lister("gs")

        assert lister.client_manager.config.project == "env-project"


class TestListingErrorLogging:
    """Test listing failures are left to the caller to report."""

    @patch("bucket_glob.objectstorage.listing.key_listing.logger")
    @patch("bucket_glob.objectstorage.clients.gcs_client.storage.Client")
    def test_failure_not_logged_as_error(self, mock_client_cls, mock_logger):
        """Test a failed listing is only logged at debug level."""
        mock_client_cls.return_value.list_blobs.side_effect = Forbidden("denied")

        lister = GCSObjectLister(GCSClientConfig())
        with pytest.raises(BackendError):
            list(lister.list_keys("b"))

        mock_logger.error.assert_not_called()
        mock_logger.debug.assert_called_once()
