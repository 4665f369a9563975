"""Configuration management for bucket-glob."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "bucket-glob"

    gcs_project: Optional[str] = None
    s3_region_name: str = "us-east-1"
    s3_endpoint_url: Optional[str] = None
    aws_profile: Optional[str] = None

    model_config = {
        "env_prefix": "BUCKET_GLOB_",
        "case_sensitive": False,
    }


settings = Settings()
