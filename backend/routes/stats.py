"""Counters and configuration as JSON."""

from fastapi import APIRouter, Depends

from services.context import AppContext, get_context

router = APIRouter()


@router.get("/stats")
async def stats(ctx: AppContext = Depends(get_context)) -> dict:
    return ctx.snapshot()
