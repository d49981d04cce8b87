"""
User/color persistence (raw SQL).

Schema (see `db/schema.sql`):
- colors(colorid, r, g, b) with UNIQUE (r, g, b)
- users(userid, name, color -> colors.colorid)

Colors are shared between users and are never deleted.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db

logger = logging.getLogger(__name__)


async def list_users(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT users.userid, users.name, colors.r, colors.g, colors.b
        FROM users
        INNER JOIN colors ON colors.colorid = users.color
        ORDER BY users.userid
        """,
    )


async def get_user_by_id(pool: asyncpg.Pool, user_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        pool,
        """
        SELECT users.userid, users.name, colors.r, colors.g, colors.b
        FROM users
        INNER JOIN colors ON colors.colorid = users.color
        WHERE users.userid = $1
        """,
        user_id,
    )


async def create_user(pool: asyncpg.Pool, *, name: str, r: int, g: int, b: int) -> int:
    """
    Insert a user, creating its color first when the triple is new.

    Color upsert, color lookup and user insert share one transaction, so a
    failure leaves neither an orphan color nor a user with a missing color.
    Returns the new user id.
    """
    async with pool.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            status = await conn.execute(
                """
                INSERT INTO colors (r, g, b)
                VALUES ($1, $2, $3)
                ON CONFLICT (r, g, b) DO NOTHING
                """,
                r,
                g,
                b,
            )
            if db.rows_affected(status) == 0:
                logger.debug("color_exists r=%s g=%s b=%s", r, g, b)

            color_id = await conn.fetchval(
                """
                SELECT colorid
                FROM colors
                WHERE r = $1 AND g = $2 AND b = $3
                """,
                r,
                g,
                b,
            )
            if color_id is None:
                raise RuntimeError("Color row missing right after upsert.")

            user_id = await conn.fetchval(
                """
                INSERT INTO users (name, color)
                VALUES ($1, $2)
                RETURNING userid
                """,
                name,
                color_id,
            )
            if user_id is None:
                raise RuntimeError("Failed to insert user.")

    logger.info("user_created user_id=%s colorid=%s", user_id, color_id)
    return int(user_id)


async def delete_user(pool: asyncpg.Pool, user_id: int) -> bool:
    """
    Delete a user. Returns False when no row matched.
    The referenced color row is kept.
    """
    status = await db.execute(
        pool,
        """
        DELETE FROM users
        WHERE userid = $1
        """,
        user_id,
    )
    return db.rows_affected(status) > 0


async def count_colors(pool: asyncpg.Pool) -> int:
    """
    Number of stored colors, orphans included. Not exposed over HTTP; it is
    for operators and tests checking color dedup and retention.
    """
    row = await db.fetch_one(pool, "SELECT count(*) AS n FROM colors")
    return int((row or {}).get("n", 0))
