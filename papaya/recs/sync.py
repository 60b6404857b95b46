import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from papaya.models.models import Look
from papaya.recs.client import RecommenderClient, RecommenderError
from papaya.recs.types import RecommenderItem

logger = logging.getLogger("uvicorn.error")


def look_to_item(look: Look) -> RecommenderItem:
    return RecommenderItem(
        item_id=look.slug,
        categories=[look.sex],
        labels=sorted({it.slug for it in look.items}),
        comment=look.name,
        timestamp=look.created_at,
    )


async def sync_looks(session: AsyncSession, client: RecommenderClient, batch_size: int = 100) -> int:
    """Push every live look to the recommender; returns how many were sent.

    A look the recommender rejects is logged and skipped.
    """
    sent = 0
    failed = 0
    last_id = 0
    while True:
        res = await session.execute(
            select(Look)
            .where(Look.deleted_at.is_(None), Look.id > last_id)
            .order_by(Look.id)
            .limit(batch_size)
        )
        batch = res.scalars().all()
        if not batch:
            break
        for look in batch:
            try:
                await client.insert_item(look_to_item(look))
            except RecommenderError as e:
                failed += 1
                logger.warning("recommender:sync skipped look=%s: %s", look.slug, e)
                continue
            sent += 1
        last_id = batch[-1].id
        logger.info("recommender:sync pushed=%s failed=%s last_id=%s", sent, failed, last_id)
    return sent
