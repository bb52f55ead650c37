"""
Chromascope v1 API Routes
Implements the /v1/analyze endpoints and the metrics summary.
"""
import asyncio
import time
from typing import Optional

from fastapi import APIRouter, File, HTTPException, Query, Request, UploadFile

from chromascope.config import config
from chromascope.schemas import AnalysisResult, AnalyzeRequestBase64, ErrorResponse
from chromascope.services.colors import analyze_image
from chromascope.services.imaging import SamplingError, decode_base64_image
from chromascope.utils.ids import generate_request_id
from chromascope.utils.logging import get_logger
from chromascope.utils.metrics import get_metrics

router = APIRouter(prefix="/v1", tags=["Palette Analysis"])
logger = get_logger()

UNABLE_TO_ANALYZE = "Unable to analyze image. Please try another file."

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "File too large or corrupt"},
    415: {"model": ErrorResponse, "description": "Unsupported media type"},
    422: {"model": ErrorResponse, "description": "Image could not be sampled"},
}


def validate_file_upload(file: UploadFile) -> None:
    """
    Validate uploaded file metadata before reading it.

    Raises:
        HTTPException: 400 for oversized files, 415 for unsupported formats
    """
    if file.size and file.size > config.MAX_FILE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )

    if file.content_type not in config.SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}"
        )

    if file.filename and '.' in file.filename:
        ext = file.filename.lower().rsplit('.', 1)[-1]
        if f".{ext}" not in config.SUPPORTED_EXTENSIONS:
            raise HTTPException(
                status_code=415,
                detail=f"Unsupported file extension. Supported: {', '.join(sorted(config.SUPPORTED_EXTENSIONS))}"
            )


def validate_magic_bytes(file_bytes: bytes) -> str:
    """
    Validate file magic bytes to ensure it's actually an image.

    Returns:
        Detected MIME type

    Raises:
        HTTPException: 400 for invalid/corrupt files
    """
    if len(file_bytes) < 12:
        raise HTTPException(status_code=400, detail="File too small or corrupt")

    if file_bytes.startswith(b'\xff\xd8\xff'):
        return "image/jpeg"
    elif file_bytes.startswith(b'\x89PNG\r\n\x1a\n'):
        return "image/png"
    elif file_bytes[:4] == b'RIFF' and file_bytes[8:12] == b'WEBP':
        return "image/webp"
    elif file_bytes[:6] in (b'GIF87a', b'GIF89a'):
        return "image/gif"
    else:
        raise HTTPException(
            status_code=400,
            detail="Invalid image file. Magic bytes don't match supported formats."
        )


def resolve_hue_mode(hue_mode: Optional[str]) -> str:
    """Use the query override when given, else the configured mode."""
    mode = hue_mode or config.HUE_MODE
    if not config.validate_hue_mode(mode):
        raise HTTPException(status_code=500, detail=f"Invalid configured hue mode: {mode}")
    return mode


def request_id_of(request: Request) -> str:
    """Request ID assigned by the middleware, or a fresh one."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = generate_request_id("ana")
        request.state.request_id = request_id
    return request_id


def reject(e: HTTPException, request_id: str, error_type: str) -> HTTPException:
    """Count a failed request and tag the error response with its request ID."""
    if config.METRICS_ENABLED:
        get_metrics().increment_failure_count(error_type)
    logger.warning(f"Request rejected ({e.status_code}): {e.detail}", extra={"request_id": request_id})
    return HTTPException(
        status_code=e.status_code,
        detail=e.detail,
        headers={"X-Request-ID": request_id}
    )


def check_size(image_bytes: bytes) -> None:
    """Reject payloads above the configured upload limit."""
    if len(image_bytes) > config.MAX_FILE_MB * 1024 * 1024:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {config.MAX_FILE_MB}MB"
        )


async def run_analysis(image_bytes: bytes, hue_mode: str, request_id: str) -> AnalysisResult:
    """Run the CPU-bound analysis off the event loop and record metrics."""
    metrics = get_metrics()
    start_time = time.time()

    try:
        result = await asyncio.to_thread(
            analyze_image, image_bytes, config.SAMPLE_MAX_EDGE, hue_mode
        )
    except SamplingError as e:
        logger.warning(f"Sampling failed: {e}", extra={"request_id": request_id})
        raise reject(HTTPException(status_code=422, detail=UNABLE_TO_ANALYZE), request_id, "sampling")
    except Exception as e:
        logger.error(f"Analysis failed: {e}", extra={"request_id": request_id})
        raise reject(HTTPException(status_code=500, detail="Internal analysis error"), request_id, "internal")

    duration_ms = (time.time() - start_time) * 1000
    if config.METRICS_ENABLED:
        metrics.record_timing("analyze", duration_ms)
        metrics.record_palette_size(len(result.palette))
        metrics.increment_harmony_count(result.color_harmony)
        if not result.palette:
            metrics.increment_empty_histogram_count()

    logger.info(
        f"Analysis served: {len(result.palette)} colors, {result.color_harmony}",
        extra={"request_id": request_id, "ms_total": round(duration_ms, 1)}
    )
    return result


@router.post("/analyze",
             response_model=AnalysisResult,
             responses=ERROR_RESPONSES,
             summary="Analyze Uploaded Image",
             description="Extract the ranked palette, harmony and contrast color of an uploaded image")
async def analyze_upload(
    request: Request,
    file: UploadFile = File(..., description="Image file (JPEG, PNG, WebP or GIF)"),
    hue_mode: Optional[str] = Query(None, pattern="^(linear|circular)$", description="Hue spread mode"),
):
    request_id = request_id_of(request)
    if config.METRICS_ENABLED:
        get_metrics().increment_request_count()
    logger.info(f"Analyze request for {file.filename}", extra={"request_id": request_id})

    try:
        validate_file_upload(file)
        try:
            file_bytes = await file.read()
        except Exception as e:
            raise HTTPException(status_code=400, detail=f"Failed to read file: {str(e)}")
        check_size(file_bytes)
        validate_magic_bytes(file_bytes)
        mode = resolve_hue_mode(hue_mode)
    except HTTPException as e:
        raise reject(e, request_id, "validation")

    return await run_analysis(file_bytes, mode, request_id)


@router.post("/analyze/base64",
             response_model=AnalysisResult,
             responses=ERROR_RESPONSES,
             summary="Analyze Inline Image",
             description="Same as /v1/analyze for a base64 payload or data URL")
async def analyze_base64(
    request: Request,
    body: AnalyzeRequestBase64,
    hue_mode: Optional[str] = Query(None, pattern="^(linear|circular)$", description="Hue spread mode"),
):
    request_id = request_id_of(request)
    if config.METRICS_ENABLED:
        get_metrics().increment_request_count()
    logger.info("Analyze request for inline image", extra={"request_id": request_id})

    try:
        image_bytes = decode_base64_image(body.image_b64)
    except SamplingError as e:
        logger.warning(f"Base64 decode failed: {e}", extra={"request_id": request_id})
        raise reject(HTTPException(status_code=422, detail=UNABLE_TO_ANALYZE), request_id, "decode")

    try:
        check_size(image_bytes)
        mode = resolve_hue_mode(hue_mode)
    except HTTPException as e:
        raise reject(e, request_id, "validation")

    return await run_analysis(image_bytes, mode, request_id)


@router.get("/metrics", summary="Analysis Metrics")
def analysis_metrics():
    """Get in-process analysis metrics."""
    return get_metrics().get_summary()
