import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.auth.deps import get_current_user
from papaya.core.config import settings
from papaya.core.db import get_session
from papaya.models.models import Category, Look, User, look_categories
from papaya.recs.client import RecommenderError
from papaya.schemas.looks import CategoryFeedOut, CategoryOut, FeedOut, LookOut
from papaya.services.deps import get_feed_service
from papaya.services.feed import FeedService, InvalidFeedRequest

router = APIRouter(prefix="/feed", tags=["feed"])
logger = logging.getLogger("uvicorn.error")


@router.get("", response_model=FeedOut)
async def get_feed(
    page: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    service: FeedService = Depends(get_feed_service),
):
    try:
        looks = await service.feed(session, user, page)
    except InvalidFeedRequest as e:
        raise HTTPException(status_code=400, detail="profile_incomplete") from e
    except (RecommenderError, SQLAlchemyError) as e:
        logger.exception("feed:error user=%s page=%s", user.id, page)
        raise HTTPException(status_code=500, detail="feed_failed") from e

    res = await session.execute(select(Category).order_by(Category.id))
    categories = res.scalars().all()
    return FeedOut(
        page=page,
        looks=[LookOut.model_validate(look) for look in looks],
        categories=[CategoryOut.model_validate(c) for c in categories],
    )


@router.get("/{category}", response_model=CategoryFeedOut)
async def get_feed_by_category(
    category: str,
    page: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
):
    res = await session.execute(select(Category).where(Category.slug == category))
    cat = res.scalar_one_or_none()
    if not cat:
        raise HTTPException(status_code=404, detail="not_found")

    size = settings.FEED_CATEGORY_PAGE_SIZE
    res = await session.execute(
        select(Look)
        .join(look_categories, look_categories.c.look_id == Look.id)
        .where(
            look_categories.c.category_id == cat.id,
            Look.sex == user.sex,
            Look.deleted_at.is_(None),
        )
        .order_by(Look.id.desc())
        .limit(size)
        .offset(size * page)
    )
    looks = res.scalars().all()
    return CategoryFeedOut(
        page=page,
        looks=[LookOut.model_validate(look) for look in looks],
        category=CategoryOut.model_validate(cat),
    )
