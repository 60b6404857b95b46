from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.auth.deps import get_current_user
from papaya.core.db import get_session
from papaya.models.models import Look, User, liked_looks
from papaya.schemas.looks import LookOut

router = APIRouter(prefix="/liked", tags=["liked"])


@router.get("", response_model=List[LookOut])
async def list_liked(
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
):
    res = await session.execute(
        select(Look)
        .join(liked_looks, liked_looks.c.look_id == Look.id)
        .where(liked_looks.c.user_id == user.id, Look.deleted_at.is_(None))
        .order_by(Look.id.desc())
    )
    return [LookOut.model_validate(look) for look in res.scalars().all()]
