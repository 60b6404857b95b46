from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.auth.deps import get_current_user
from papaya.core.db import get_session
from papaya.models.models import Look, User, saved_looks
from papaya.recs.client import RecommenderClient
from papaya.routers.looks_helpers import _get_look, _link, _send_feedback, _unlink
from papaya.schemas.looks import LookOut, SuccessOut
from papaya.services.deps import get_recommender

router = APIRouter(prefix="/saved", tags=["saved"])


@router.get("", response_model=List[LookOut])
async def list_saved(
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
):
    res = await session.execute(
        select(Look)
        .join(saved_looks, saved_looks.c.look_id == Look.id)
        .where(saved_looks.c.user_id == user.id, Look.deleted_at.is_(None))
        .order_by(Look.id.desc())
    )
    return [LookOut.model_validate(look) for look in res.scalars().all()]


@router.post("/{slug}", response_model=SuccessOut)
async def save_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _link(session, saved_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.insert_feedback("star", str(user.id), look.slug), "star")
    return SuccessOut()


@router.delete("/{slug}", response_model=SuccessOut)
async def unsave_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _unlink(session, saved_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.delete_feedback("star", str(user.id), look.slug), "unstar")
    return SuccessOut()
