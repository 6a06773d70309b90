"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import FluConfig
from serve import routes
from store.dataset_store import DatasetStore
from store.dataset_sdk import FluClient


def create_app(config: FluConfig | None = None, store: DatasetStore | None = None) -> FastAPI:
    """Build the HTTP app around one SDK client.

    Args:
        config: Optional runtime configuration; read from env when omitted.
        store: Optional dataset store override.

    Returns:
        Configured FastAPI application.
    """
    client = FluClient(config, store)
    app = FastAPI(title="Flumap API", version="0.1.0")
    app.state.client = client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[client.config.cors_origin],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(routes.router, prefix="/api", tags=["datasets"])

    @app.get("/health", tags=["health"])
    def healthcheck() -> dict[str, str]:
        """Simple health endpoint for uptime probes."""
        return {"status": "ok"}

    return app
