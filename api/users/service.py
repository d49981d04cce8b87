"""
User business logic.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_user(row: dict) -> schemas.User:
    return schemas.User(
        name=str(row["name"]),
        color=schemas.Color(r=int(row["r"]), g=int(row["g"]), b=int(row["b"])),
    )


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found.",
    )


async def list_users(pool: asyncpg.Pool) -> list[schemas.User]:
    rows = await repository.list_users(pool)
    return [_to_user(row) for row in rows]


async def get_user(pool: asyncpg.Pool, user_id: int) -> schemas.User:
    row = await repository.get_user_by_id(pool, user_id)
    if row is None:
        raise _not_found()
    return _to_user(row)


async def create_user(pool: asyncpg.Pool, payload: schemas.User) -> int:
    return await repository.create_user(
        pool,
        name=payload.name,
        r=payload.color.r,
        g=payload.color.g,
        b=payload.color.b,
    )


async def delete_user(pool: asyncpg.Pool, user_id: int) -> None:
    deleted = await repository.delete_user(pool, user_id)
    if not deleted:
        logger.warning("user_delete_missing user_id=%s", user_id)
        raise _not_found()
    logger.info("user_deleted user_id=%s", user_id)
