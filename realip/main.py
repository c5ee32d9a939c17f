"""Demo FastAPI application exposing the client IP resolver."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from realip import __version__
from realip.api.v1.api import api_router
from realip.config import settings
from realip.logging_config import configure_logging

# Configure root logger early
configure_logging(settings.log_level)

log = logging.getLogger(__name__)

app = FastAPI(
    title="Real IP",
    description="Resolves the originating client IP behind reverse proxies",
    version=__version__
)

@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__
    }

@app.get("/")
async def root():
    """Root endpoint - redirect to docs."""
    return {
        "message": "Real IP API",
        "version": __version__,
        "docs": "/docs"
    }

app.include_router(api_router, prefix=settings.api_v1_str)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    log.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, proxy_headers=False)
