from __future__ import annotations

import logging
from typing import Awaitable

from fastapi import HTTPException
from sqlalchemy import Table, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.core.db import insert_ignore
from papaya.models.models import Look
from papaya.recs.client import RecommenderError

logger = logging.getLogger("uvicorn.error")


async def _get_look(session: AsyncSession, slug: str) -> Look:
    res = await session.execute(select(Look).where(Look.slug == slug, Look.deleted_at.is_(None)))
    look = res.scalar_one_or_none()
    if not look:
        raise HTTPException(status_code=404, detail="not_found")
    return look


async def _is_linked(session: AsyncSession, table: Table, user_id: int, look_id: int) -> bool:
    res = await session.execute(
        select(table.c.look_id).where(table.c.user_id == user_id, table.c.look_id == look_id)
    )
    return res.first() is not None


async def _link(session: AsyncSession, table: Table, user_id: int, look_id: int) -> None:
    await session.execute(insert_ignore(session, table, [{"user_id": user_id, "look_id": look_id}]))


async def _unlink(session: AsyncSession, table: Table, user_id: int, look_id: int) -> None:
    await session.execute(delete(table).where(table.c.user_id == user_id, table.c.look_id == look_id))


async def _send_feedback(call: Awaitable[None], action: str) -> None:
    # recommender feedback is best effort; the user action already succeeded
    try:
        await call
    except RecommenderError as e:
        logger.error("recommender error on %s feedback: %s", action, e)
