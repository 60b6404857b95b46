import logging
import random

from sqlalchemy.ext.asyncio import AsyncSession

from papaya.models.models import Look, User, SEXES
from papaya.recs.base import Recommender
from papaya.recs.config import FeedConfig
from papaya.recs.queries import looks_by_slugs_query, wardrobe_affinity_query

logger = logging.getLogger("uvicorn.error")


class InvalidFeedRequest(ValueError):
    pass


class FeedService:
    """Composes a feed page from recommender picks and wardrobe-affinity looks.

    Recommender looks come first, then up to ``wardrobe_limit`` looks that
    share an item with the user's wardrobe and were not already picked. When
    the recommender has nothing for the page the wardrobe query runs in
    fallback mode with ``fallback_limit`` and no exclusion. The page is
    shuffled before it is returned, so order differs between calls.
    """

    def __init__(
        self,
        recommender: Recommender,
        config: FeedConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.recommender = recommender
        self.config = config or FeedConfig()
        self.rng = rng or random.Random()

    async def feed(self, session: AsyncSession, user: User, page: int) -> list[Look]:
        _check_request(user, page)
        cfg = self.config

        slugs = await self.recommender.recommend_for_user_and_category(
            str(user.id), user.sex, cfg.rec_limit, cfg.rec_limit * page
        )
        # the page bound holds even when the service ignores ``n``
        slugs = slugs[: cfg.rec_limit]

        looks: list[Look] = []
        if slugs:
            res = await session.execute(looks_by_slugs_query(user.id, user.sex, slugs))
            looks = list(res.scalars().all())
            for look in looks:
                look.is_from_wardrobe = False
            limit, exclude = cfg.wardrobe_limit, slugs
        else:
            logger.debug("feed:fallback user=%s page=%s", user.id, page)
            limit, exclude = cfg.fallback_limit, None

        res = await session.execute(
            wardrobe_affinity_query(user.id, user.sex, limit=limit, offset=limit * page, exclude_slugs=exclude)
        )
        from_wardrobe = list(res.scalars().all())
        for look in from_wardrobe:
            look.is_from_wardrobe = True

        result = looks + from_wardrobe
        self.rng.shuffle(result)
        return result


def _check_request(user: User, page: int) -> None:
    if not user.id:
        raise InvalidFeedRequest("user id is required")
    if user.sex not in SEXES:
        raise InvalidFeedRequest(f"unsupported sex: {user.sex!r}")
    if page < 0:
        raise InvalidFeedRequest("page must be non-negative")
