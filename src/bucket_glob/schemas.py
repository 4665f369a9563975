"""Schemas for storage paths and backend configuration."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Scheme = Literal["gs", "s3"]


class PathSpec(BaseModel):
    """A parsed ``scheme://bucket/pattern`` path."""

    model_config = ConfigDict(frozen=True)

    scheme: Scheme = Field(..., description="Storage scheme without '://'")
    bucket: str = Field(..., min_length=1, description="Bucket name")
    pattern: str = Field("**", description="Glob pattern matched against keys")

    def uri(self, key: str) -> str:
        """Render a key of this bucket in canonical ``scheme://bucket/key`` form."""
        return f"{self.scheme}://{self.bucket}/{key}"


class GCSClientConfig(BaseModel):
    """Configuration for Google Cloud Storage clients.

    Credentials are always discovered through Application Default Credentials.
    """

    model_config = ConfigDict(extra="forbid")

    project: Optional[str] = Field(None, description="GCP project for the client")


class S3ClientConfig(BaseModel):
    """Configuration for S3 client connections.

    Credentials come from the default AWS credential chain, or from the named
    profile when ``aws_profile`` is set.
    """

    model_config = ConfigDict(extra="forbid")

    region_name: str = Field("us-east-1", description="AWS region name")
    endpoint_url: Optional[str] = Field(
        None, description="Custom S3 endpoint URL for S3-compatible services"
    )
    aws_profile: Optional[str] = Field(
        None, description="AWS CLI profile name to use for credentials"
    )
