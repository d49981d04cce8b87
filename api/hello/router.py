"""
Greeting endpoints (mounted under /hello). No storage involved.
"""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Path
from fastapi.responses import PlainTextResponse

# Largest unsigned 64-bit value; bigger counts cannot be slept on.
MAX_DELAY_SECONDS = 2**64 - 1

router = APIRouter(default_response_class=PlainTextResponse)


@router.get("/")
async def index() -> str:
    return "Hello, world!"


@router.get("/delay/{seconds}")
async def delay(seconds: int = Path(..., ge=0, le=MAX_DELAY_SECONDS)) -> str:
    # Only this request is suspended; the event loop keeps serving others.
    await asyncio.sleep(seconds)
    return f"Waited for {seconds} seconds"


@router.get("/{name}")
async def hello(name: str) -> str:
    return f"Hello, {name}!"
