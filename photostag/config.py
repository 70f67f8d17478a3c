"""Engine configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings."""

    # Output defaults
    DEFAULT_OUTPUT_FORMAT: str = "png"
    DEFAULT_JPEG_QUALITY: int = 85

    # Limits
    MAX_IMAGE_PIXELS: int = 8192 * 8192  # Reject larger inputs at decode time

    # Batch settings
    BATCH_MAX_WORKERS: int | None = None  # None = os.cpu_count()

    model_config = {"env_prefix": "PHOTOSTAG_"}


settings = Settings()
