"""Trigger route — runs the fetch sequence in the background."""

from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import PlainTextResponse

from services.context import AppContext, get_context
from services.sequence import run_fetch_sequence

router = APIRouter()

ACK_MESSAGE = "Check server console for results"


@router.get("/api", response_class=PlainTextResponse)
async def trigger_fetch(
    background_tasks: BackgroundTasks,
    ctx: AppContext = Depends(get_context),
) -> str:
    """Schedule one sequence run; the response does not wait for it."""
    background_tasks.add_task(run_fetch_sequence, ctx)
    return ACK_MESSAGE
