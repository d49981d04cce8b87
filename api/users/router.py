"""
User API endpoints (mounted under /api/v1).
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Path, Response

from core import db

from . import schemas, service

# users.userid is a bigserial.
MAX_USER_ID = 2**63 - 1

router = APIRouter()


@router.get("/user", response_model=list[schemas.User])
async def list_users(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[schemas.User]:
    return await service.list_users(pool)


@router.get("/user/{user_id}", response_model=schemas.User)
async def get_user(
    user_id: int = Path(..., ge=0, le=MAX_USER_ID),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> schemas.User:
    return await service.get_user(pool, user_id)


@router.post("/user")
async def create_user(
    user: schemas.User,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Response:
    await service.create_user(pool, user)
    return Response(status_code=200)


@router.delete("/user/{user_id}")
async def delete_user(
    user_id: int = Path(..., ge=0, le=MAX_USER_ID),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Response:
    await service.delete_user(pool, user_id)
    return Response(status_code=200)
