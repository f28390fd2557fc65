"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request

from nutritrack.api.models import EntryBreakdownResponse, EntryRequest
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close application resources")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/entries/price")
    async def price_entry(
        entry: EntryRequest, request: Request
    ) -> EntryBreakdownResponse:
        """Split a free-text entry into items and price each one."""
        state_container: AppContainer = request.app.state.container
        breakdown = await state_container.pricing_service.price_entry(entry.text)
        if breakdown.status == "empty":
            raise HTTPException(
                status_code=422,
                detail=breakdown.error,
            )
        if breakdown.status == "unresolved":
            logger.info("Entry unresolved: items=%s", len(breakdown.items))
        return EntryBreakdownResponse.from_breakdown(breakdown)

    return app
