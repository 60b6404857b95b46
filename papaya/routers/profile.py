from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.auth.deps import get_current_user
from papaya.core.db import get_session, insert_ignore
from papaya.models.models import SEX_UNISEX, User, WardrobeItem, users_wardrobe
from papaya.schemas.looks import SetWardrobeIn, SuccessOut, WardrobeItemOut

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("/set-wardrobe", response_model=SuccessOut)
async def set_wardrobe(
    body: SetWardrobeIn,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
):
    wanted = set(body.wardrobe)
    if wanted:
        res = await session.execute(select(WardrobeItem.id).where(WardrobeItem.id.in_(wanted)))
        if set(res.scalars().all()) != wanted:
            raise HTTPException(status_code=400, detail="unknown_wardrobe_item")

    await session.execute(delete(users_wardrobe).where(users_wardrobe.c.user_id == user.id))
    if wanted:
        rows = [{"user_id": user.id, "wardrobe_item_id": item_id} for item_id in sorted(wanted)]
        await session.execute(insert_ignore(session, users_wardrobe, rows))
    await session.commit()
    return SuccessOut()


@router.get("/get-wardrobe", response_model=List[WardrobeItemOut])
async def get_wardrobe(
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
):
    res = await session.execute(
        select(WardrobeItem)
        .join(users_wardrobe, users_wardrobe.c.wardrobe_item_id == WardrobeItem.id)
        .where(
            users_wardrobe.c.user_id == user.id,
            or_(WardrobeItem.sex == user.sex, WardrobeItem.sex == SEX_UNISEX),
        )
        .order_by(WardrobeItem.id)
    )
    return [WardrobeItemOut.model_validate(item) for item in res.scalars().all()]
