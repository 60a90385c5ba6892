"""Slack Events API router for local development and container hosting."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from channel_relay.errors import (
    AuthenticationError,
    ClassificationError,
    ClassificationKind,
    ConfigurationError,
    DependencyError,
)
from channel_relay.models.verification import InboundRequest
from channel_relay.pipeline import DispatchPipeline, build_dispatch_pipeline
from channel_relay.slack.verification import SIGNATURE_HEADER, TIMESTAMP_HEADER

router = APIRouter(prefix="", tags=["slack"])


def get_dispatch_pipeline() -> DispatchPipeline:
    """Dependency returning the SSM/SNS-backed pipeline. Overridden in tests."""
    return build_dispatch_pipeline()


@router.post("/slack/events")
async def slack_events(
    request: Request,
    pipeline: DispatchPipeline = Depends(get_dispatch_pipeline),
) -> JSONResponse:
    """Receive Slack webhook events.

    Reads the raw body FIRST (before any JSON parsing) so verification sees
    the exact bytes Slack signed. HTTP header names arrive lowercased, so the
    two Slack headers are re-keyed under their canonical names. A body that
    is not UTF-8 cannot be a Slack payload and is refused before verification.
    """
    try:
        body = (await request.body()).decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail=ClassificationKind.MALFORMED_JSON.value)
    headers = {
        name: request.headers[name]
        for name in (TIMESTAMP_HEADER, SIGNATURE_HEADER)
        if name in request.headers
    }
    inbound = InboundRequest(headers=headers, body=body)

    try:
        response = await asyncio.to_thread(pipeline.handle_request, inbound)
    except AuthenticationError:
        raise HTTPException(status_code=403, detail="Invalid Slack signature")
    except ClassificationError as exc:
        raise HTTPException(status_code=400, detail=exc.kind.value)
    except DependencyError:
        raise HTTPException(status_code=502, detail="Upstream dependency failed")
    except ConfigurationError:
        raise HTTPException(status_code=500, detail="Service misconfigured")

    return JSONResponse(response.model_dump())
