from typing import Iterable, Optional

from sqlalchemy import Select, select

from papaya.models.models import Look, look_items, saved_looks, users_wardrobe


def _saved_by(user_id: int):
    return select(saved_looks.c.look_id).where(saved_looks.c.user_id == user_id)


def _visible_to(user_id: int, sex: str):
    return (
        Look.sex == sex,
        Look.deleted_at.is_(None),
        Look.id.not_in(_saved_by(user_id)),
    )


def looks_by_slugs_query(user_id: int, sex: str, slugs: Iterable[str]) -> Select:
    return select(Look).where(Look.slug.in_(list(slugs)), *_visible_to(user_id, sex)).order_by(Look.id)


def wardrobe_affinity_query(
    user_id: int,
    sex: str,
    limit: int,
    offset: int,
    exclude_slugs: Optional[Iterable[str]] = None,
) -> Select:
    """Looks sharing at least one item with the user's wardrobe, newest first.

    Saved and soft-deleted looks are never returned. ``exclude_slugs`` drops
    looks already picked for the page; ``None`` or empty means no exclusion.
    """
    in_wardrobe = (
        select(look_items.c.look_id)
        .join(users_wardrobe, users_wardrobe.c.wardrobe_item_id == look_items.c.wardrobe_item_id)
        .where(users_wardrobe.c.user_id == user_id)
    )
    stmt = select(Look).where(Look.id.in_(in_wardrobe), *_visible_to(user_id, sex))
    excluded = list(exclude_slugs or [])
    if excluded:
        stmt = stmt.where(Look.slug.not_in(excluded))
    return stmt.order_by(Look.id.desc()).limit(limit).offset(offset)
