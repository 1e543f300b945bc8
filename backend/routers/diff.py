"""Diff API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from sse_starlette.sse import EventSourceResponse
from starlette.concurrency import run_in_threadpool

from models.diff import CompareRequest, DiffResult, DiffStreamEvent, RenderResponse
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.diff_renderer import DiffRenderer

logger = logging.getLogger(__name__)

router = APIRouter()
diff_renderer = DiffRenderer()

COMPUTE_ERROR = "Could not compute differences"


def get_generator(request: CompareRequest) -> DiffGenerator:
    """Build a generator from the current config, honouring a per-request algorithm"""
    config = ConfigManager.get_instance().get_config()
    algorithm = request.algorithm.value if request.algorithm else None
    try:
        return DiffGenerator.from_config(config, algorithm=algorithm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def compute(request: CompareRequest) -> DiffResult:
    """Run the engine off the event loop, mapping failures to HTTP errors"""
    generator = get_generator(request)
    try:
        return await run_in_threadpool(generator.generate_diff, request.text1, request.text2)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Diff computation failed (%d / %d chars)", len(request.text1), len(request.text2))
        raise HTTPException(status_code=500, detail=COMPUTE_ERROR)


@router.post("/compare", response_model=DiffResult)
async def compare(request: CompareRequest) -> DiffResult:
    """Compute the token-level edit script of two texts"""
    return await compute(request)


@router.post("/render", response_model=RenderResponse)
async def render(request: CompareRequest) -> RenderResponse:
    """Compute the diff and render the deleted/inserted HTML views"""
    result = await compute(request)
    rendered = diff_renderer.render(result)

    return RenderResponse(
        html=rendered.to_html(),
        message=rendered.message,
        deleted_html=rendered.deleted_html,
        inserted_html=rendered.inserted_html,
        time_taken=rendered.time_taken,
        elapsed_ms=result.elapsed_ms,
    )


@router.post("/stream")
async def stream(request: CompareRequest):
    """Compute the diff and stream its operations (SSE)"""
    generator = get_generator(request)

    async def event_generator():
        try:
            result = await run_in_threadpool(generator.generate_diff, request.text1, request.text2)

            for op in result.operations:
                event = DiffStreamEvent(type="operation", operation=op)
                yield {"event": "message", "data": event.model_dump_json()}

            event = DiffStreamEvent(type="done", elapsed_ms=result.elapsed_ms, stats=result.stats)
            yield {"event": "message", "data": event.model_dump_json()}

        except Exception:
            logger.exception("Streaming diff failed")
            event = DiffStreamEvent(type="error", error=COMPUTE_ERROR)
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())
