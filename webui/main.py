"""FastAPI application entry point"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config import Config
from webui.api import music, tv
from webui.api.response import envelope

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Added to every response
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "1",
}


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the API application from configuration"""
    config = config or Config()

    app = FastAPI(
        title="Tagger API",
        description="Season/episode and song tagging for media file names",
        version=VERSION
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler"""
        logger.error(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {exc}")
        # Runs outside the HTTP middleware, so headers are added here too
        response = envelope(500, "Internal server error")
        response.headers.update(SECURITY_HEADERS)
        return response

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "Tagger API", "version": VERSION}

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {"status": "healthy"}

    # Include routers
    app.include_router(tv.router)
    app.include_router(music.router)

    return app


# Defaults only; start_webui.py builds its own app from config.yaml
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
