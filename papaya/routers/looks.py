from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.auth.deps import get_current_user
from papaya.core.db import get_session
from papaya.models.models import User, disliked_looks, liked_looks, saved_looks
from papaya.recs.client import RecommenderClient
from papaya.routers.looks_helpers import _get_look, _is_linked, _link, _send_feedback, _unlink
from papaya.schemas.looks import LookDetailOut, LookOut, SuccessOut
from papaya.services.deps import get_recommender

router = APIRouter(prefix="/looks", tags=["looks"])


@router.get("/{slug}", response_model=LookDetailOut)
async def get_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _send_feedback(recommender.insert_feedback("read", str(user.id), look.slug), "read")
    return LookDetailOut(
        look=LookOut.model_validate(look),
        is_liked=await _is_linked(session, liked_looks, user.id, look.id),
        is_disliked=await _is_linked(session, disliked_looks, user.id, look.id),
        is_saved=await _is_linked(session, saved_looks, user.id, look.id),
    )


@router.put("/{slug}/like", response_model=SuccessOut)
async def like_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _link(session, liked_looks, user.id, look.id)
    await _unlink(session, disliked_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.insert_feedback("like", str(user.id), look.slug), "like")
    await _send_feedback(recommender.delete_feedback("dislike", str(user.id), look.slug), "undislike")
    return SuccessOut()


@router.delete("/{slug}/like", response_model=SuccessOut)
async def unlike_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _unlink(session, liked_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.delete_feedback("like", str(user.id), look.slug), "unlike")
    return SuccessOut()


@router.put("/{slug}/dislike", response_model=SuccessOut)
async def dislike_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _link(session, disliked_looks, user.id, look.id)
    await _unlink(session, liked_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.delete_feedback("like", str(user.id), look.slug), "unlike")
    await _send_feedback(recommender.insert_feedback("dislike", str(user.id), look.slug), "dislike")
    return SuccessOut()


@router.delete("/{slug}/dislike", response_model=SuccessOut)
async def undislike_look(
    slug: str,
    session: AsyncSession = Depends(get_session),
    user: User = Depends(get_current_user),
    recommender: RecommenderClient = Depends(get_recommender),
):
    look = await _get_look(session, slug)
    await _unlink(session, disliked_looks, user.id, look.id)
    await session.commit()
    await _send_feedback(recommender.delete_feedback("dislike", str(user.id), look.slug), "undislike")
    return SuccessOut()
