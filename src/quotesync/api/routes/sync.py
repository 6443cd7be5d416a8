"""Sync trigger endpoint."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from quotesync.api.dependencies import SyncSvc
from quotesync.core.exceptions import FetchError, QuotesyncError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])

SUCCESS_BODY = "Quotes and images updated in KV successfully."
FETCH_FAILURE_BODY = "Failed to fetch quotes data from GitHub."


@router.api_route(
    "/sync",
    methods=["GET", "POST"],
    response_class=PlainTextResponse,
    operation_id="runSync",
    summary="Sync quotes",
    description="Fetch the quotes dataset and merge every author into the store.",
)
async def run_sync(sync_service: SyncSvc) -> PlainTextResponse:
    """Run a full sync; responds once every author has been processed."""
    try:
        await sync_service.run()
    except FetchError as e:
        logger.error(f"Sync aborted: {e.message}")
        return PlainTextResponse(FETCH_FAILURE_BODY, status_code=500)
    except QuotesyncError as e:
        logger.exception("Sync failed mid-run")
        return PlainTextResponse(f"Sync failed: {e.message}", status_code=500)

    return PlainTextResponse(SUCCESS_BODY, status_code=200)
