import os
from enum import Enum
from functools import lru_cache
from typing import Dict, Optional

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings

SERVICE_NAME = os.getenv("POWERTOOLS_SERVICE_NAME", "image-thumbnails")


class Tier(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Settings(BaseSettings):
    """Thumbnail configuration"""

    # Target widths in pixels
    THUMBNAIL_WIDTH_SMALL: PositiveInt
    THUMBNAIL_WIDTH_MEDIUM: PositiveInt
    THUMBNAIL_WIDTH_LARGE: PositiveInt

    # Destination
    THUMBNAIL_BUCKET_NAME: str = Field(..., min_length=1)

    # AWS S3
    AWS_REGION: Optional[str] = None
    AWS_ENDPOINT_URL: Optional[str] = None

    # Encoding
    JPEG_QUALITY: int = Field(75, ge=1, le=95)

    class Config:
        env_file = ".env"
        frozen = True
        extra = "ignore"

    def tier_widths(self) -> Dict[Tier, int]:
        return {
            Tier.SMALL: self.THUMBNAIL_WIDTH_SMALL,
            Tier.MEDIUM: self.THUMBNAIL_WIDTH_MEDIUM,
            Tier.LARGE: self.THUMBNAIL_WIDTH_LARGE,
        }


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
