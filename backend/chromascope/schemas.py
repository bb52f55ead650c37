"""
Chromascope Schemas
Pydantic models for palette analysis results and API request/response validation.
"""
from typing import List, Tuple
from pydantic import BaseModel, ConfigDict, Field


class ColorData(BaseModel):
    """Single palette entry with its share of the opaque pixels."""
    model_config = ConfigDict(frozen=True)

    hex: str = Field(
        ...,
        pattern=r"^#[0-9A-F]{6}$",
        description="Upper-case hex color code in format #RRGGBB"
    )
    rgb: Tuple[int, int, int] = Field(..., description="Quantized RGB channels (0-255)")
    hsl: Tuple[int, int, int] = Field(
        ...,
        description="Hue in degrees [0, 360), saturation and lightness in percent"
    )
    percentage: int = Field(
        ...,
        ge=0,
        le=100,
        description="Share of opaque pixels in this bucket, rounded to an integer percent"
    )


class AnalysisResult(BaseModel):
    """Palette analysis of one image."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    palette: List[ColorData] = Field(
        ...,
        max_length=5,
        description="Most frequent colors first"
    )
    dominant_color: str = Field(
        ...,
        alias="dominantColor",
        pattern=r"^#[0-9A-F]{6}$",
        description="Hex of the first palette entry, #000000 for an empty palette"
    )
    color_harmony: str = Field(
        ...,
        alias="colorHarmony",
        description="Monochromatic, Complementary, Analogous, Triadic or Mixed Harmony"
    )
    contrast_suggestion: str = Field(
        ...,
        alias="contrastSuggestion",
        pattern=r"^#[0-9A-F]{6}$",
        description="Black or white, whichever contrasts with the dominant color"
    )


class AnalyzeRequestBase64(BaseModel):
    """Analyze request carrying an inline image."""
    image_b64: str = Field(
        ...,
        min_length=1,
        description="Base64-encoded image bytes, optionally as a data URL"
    )


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("chromascope", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")
