import asyncio

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from papaya.core.config import settings
from papaya.recs.client import RecommenderClient
from papaya.recs.sync import sync_looks
from .celery_app import celery


async def _sync() -> dict:
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    Session = async_sessionmaker(engine, expire_on_commit=False)
    client = RecommenderClient(
        settings.RECOMMENDER_URL,
        timeout_s=settings.RECOMMENDER_TIMEOUT_S,
        api_key=settings.RECOMMENDER_API_KEY,
    )
    try:
        async with Session() as session:
            sent = await sync_looks(session, client, batch_size=settings.RECOMMENDER_SYNC_BATCH)
    finally:
        await client.aclose()
        await engine.dispose()
    return {"ok": True, "sent": sent}


@celery.task(name="tasks.sync_looks_to_recommender")
def sync_looks_to_recommender() -> dict:
    """Mirror the look catalog into the recommender so it can rank new looks."""
    return asyncio.run(_sync())
