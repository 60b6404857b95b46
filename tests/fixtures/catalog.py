"""
Catalog builders and a scripted recommender for feed tests.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.models.models import Look, User, WardrobeItem, saved_looks, users_wardrobe

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


class FakeRecommender:
    """Returns scripted slugs and records every call."""

    def __init__(self, slugs: Optional[list[str]] = None, error: Optional[Exception] = None):
        self.slugs = slugs or []
        self.error = error
        self.feedback_error: Optional[Exception] = None
        self.calls: list[tuple] = []
        self.feedback: list[tuple] = []

    async def recommend_for_user_and_category(self, user_id, category, limit, offset):
        self.calls.append((user_id, category, limit, offset))
        if self.error:
            raise self.error
        return list(self.slugs)

    async def insert_feedback(self, feedback_type, user_id, item_id):
        self.feedback.append(("insert", feedback_type, user_id, item_id))
        if self.feedback_error:
            raise self.feedback_error

    async def delete_feedback(self, feedback_type, user_id, item_id):
        self.feedback.append(("delete", feedback_type, user_id, item_id))
        if self.feedback_error:
            raise self.feedback_error


async def add_user(session: AsyncSession, id: int, sex: Optional[str] = "female", wardrobe=()) -> User:
    user = User(id=id, email=f"user{id}@example.com", name=f"user{id}", sex=sex)
    session.add(user)
    await session.flush()
    for item in wardrobe:
        await session.execute(insert(users_wardrobe).values(user_id=id, wardrobe_item_id=item.id))
    return user


async def add_wardrobe_item(session: AsyncSession, id: int, sex: str = "female") -> WardrobeItem:
    item = WardrobeItem(id=id, name=f"item {id}", slug=f"item-{id}", sex=sex)
    session.add(item)
    await session.flush()
    return item


async def add_look(
    session: AsyncSession,
    id: int,
    slug: str,
    sex: str = "female",
    items=(),
    deleted: bool = False,
) -> Look:
    look = Look(
        id=id,
        name=f"look {slug}",
        slug=slug,
        sex=sex,
        items=list(items),
        created_at=CREATED,
        deleted_at=CREATED if deleted else None,
    )
    session.add(look)
    await session.flush()
    return look


async def save_look(session: AsyncSession, user: User, look: Look) -> None:
    await session.execute(insert(saved_looks).values(user_id=user.id, look_id=look.id))


async def seed_scenario_a(session: AsyncSession) -> User:
    """User 42 (female) owns one item shared by three live looks.

    Two more looks, "a" and "b", are what the recommender returns. Noise rows
    cover every filter: wrong sex, soft-deleted and already saved.
    """
    shirt = await add_wardrobe_item(session, 1)
    other = await add_wardrobe_item(session, 2)
    user = await add_user(session, 42, "female", wardrobe=[shirt])

    await add_look(session, 1, "a", items=[other])
    await add_look(session, 2, "b", items=[other])
    await add_look(session, 10, "w1", items=[shirt])
    await add_look(session, 11, "w2", items=[shirt, other])
    await add_look(session, 12, "w3", items=[shirt])
    await add_look(session, 20, "male-look", sex="male", items=[shirt])
    await add_look(session, 21, "gone", items=[shirt], deleted=True)
    saved = await add_look(session, 22, "saved", items=[shirt])
    await save_look(session, user, saved)
    await session.commit()
    return user
