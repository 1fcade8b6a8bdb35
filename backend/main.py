from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from colorbox import __version__
from colorbox.api.v1 import router as v1_router
from colorbox.config import config
from colorbox.schemas import HealthResponse
from colorbox.utils.logging import get_logger
from colorbox.utils.metrics import get_metrics

logger = get_logger()

app = FastAPI(
    title="Colorbox Backend",
    description="Color list normalization, conversion, generation and export API",
    version=__version__
)

# Add CORS middleware with basic configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__, service="colorbox")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Colorbox Backend API",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/metrics")
def metrics():
    """In-process counters and timings."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics disabled")
    try:
        return get_metrics().get_summary()
    except Exception as e:
        logger.error("Failed to get metrics", extra={"error": str(e)})
        raise HTTPException(status_code=500, detail=f"Failed to get metrics: {str(e)}")


logger.info("Colorbox backend ready", extra={"version": __version__})
