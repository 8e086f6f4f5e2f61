"""Configuration management for nb2md."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConversionConfig(BaseSettings):
    """Conversion settings, loadable from environment variables.

    Environment variables should be prefixed with NB2MD_
    Example: NB2MD_IMAGE_DIR=assets

    Attributes:
        skip_output: Render code cells without their outputs
        image_dir: Directory for extracted images
    """

    skip_output: bool = Field(
        default=False,
        description="Omit cell outputs and extracted images",
    )
    image_dir: Path = Field(
        default=Path("images"),
        description="Directory for extracted images",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="NB2MD_",
        case_sensitive=False,
        extra="ignore",
    )


# Global config instance (lazy-loaded)
_config: ConversionConfig | None = None


def get_config() -> ConversionConfig:
    """Get or create the global configuration instance.

    Returns:
        ConversionConfig: The configuration object
    """
    global _config
    if _config is None:
        _config = ConversionConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
