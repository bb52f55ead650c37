from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before the config class reads them
load_dotenv()

from chromascope import __version__
from chromascope.api.v1 import router as v1_router
from chromascope.config import config
from chromascope.schemas import HealthResponse
from chromascope.utils.ids import generate_request_id
from chromascope.utils.logging import get_logger

logger = get_logger()

if not config.validate_max_edge(config.SAMPLE_MAX_EDGE):
    raise RuntimeError(f"CHROMASCOPE_SAMPLE_MAX_EDGE out of range: {config.SAMPLE_MAX_EDGE}")

if not config.validate_hue_mode(config.HUE_MODE):
    raise RuntimeError(f"CHROMASCOPE_HUE_MODE must be 'linear' or 'circular', got {config.HUE_MODE!r}")

app = FastAPI(
    title="Chromascope",
    description="Deterministic color palette analysis for images",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"]
)


@app.middleware("http")
async def attach_request_id(request: Request, call_next):
    """Tag every analysis response, errors included, with its request ID."""
    if not request.url.path.startswith("/v1/analyze"):
        return await call_next(request)

    request.state.request_id = generate_request_id("ana")
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response


app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Service health check."""
    return HealthResponse(ok=True, version=__version__, service="chromascope")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Chromascope palette analysis API",
        "version": __version__,
        "docs": "/docs"
    }


logger.info("Chromascope API ready", extra={
    "sample_max_edge": config.SAMPLE_MAX_EDGE,
    "hue_mode": config.HUE_MODE
})
