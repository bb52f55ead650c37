"""
Chromascope Configuration
Manages environment variables and defaults for the palette analysis service.
"""
import os
from typing import Literal


class Config:
    """Configuration class for Chromascope services."""

    # Upload limits
    MAX_FILE_MB: int = int(os.environ.get("CHROMASCOPE_MAX_FILE_MB", "10"))

    # Sampling
    SAMPLE_MAX_EDGE: int = int(os.environ.get("CHROMASCOPE_SAMPLE_MAX_EDGE", "200"))

    # Harmony classification
    HUE_MODE: Literal["linear", "circular"] = os.environ.get("CHROMASCOPE_HUE_MODE", "linear")

    # Logging
    LOG_LEVEL: str = os.environ.get("CHROMASCOPE_LOG_LEVEL", "INFO")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("CHROMASCOPE_ALLOWED_ORIGINS", "*")

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("CHROMASCOPE_METRICS_ENABLED", "1")))

    # Supported image formats
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png", "image/webp", "image/gif"]
    SUPPORTED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}

    @classmethod
    def validate_hue_mode(cls, mode: str) -> bool:
        """Validate hue spread mode."""
        return mode in ["linear", "circular"]

    @classmethod
    def validate_max_edge(cls, max_edge: int) -> bool:
        """Validate sampling edge size."""
        return 16 <= max_edge <= 4096

    @classmethod
    def allowed_origins(cls) -> list:
        """Split the CORS origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
