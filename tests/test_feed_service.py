import random

import pytest

import papaya.services.feed.service as feed_service_mod
from papaya.models.models import User
from papaya.recs.client import RecommenderError
from papaya.recs.config import FeedConfig
from papaya.services.feed import FeedService, InvalidFeedRequest
from tests.fixtures import FakeRecommender, add_look, add_user, add_wardrobe_item, seed_scenario_a


@pytest.fixture
def query_calls(monkeypatch):
    calls = []
    original = feed_service_mod.wardrobe_affinity_query

    def spy(*args, **kwargs):
        calls.append(kwargs)
        return original(*args, **kwargs)

    monkeypatch.setattr(feed_service_mod, "wardrobe_affinity_query", spy)
    return calls


@pytest.mark.asyncio
async def test_blends_recommended_and_wardrobe_looks(session):
    user = await seed_scenario_a(session)
    recommender = FakeRecommender(["a", "b"])
    looks = await FeedService(recommender).feed(session, user, 0)

    assert recommender.calls == [("42", "female", 15, 0)]
    slugs = [look.slug for look in looks]
    assert sorted(slugs) == ["a", "b", "w1", "w2", "w3"]
    assert len(set(slugs)) == len(slugs)
    assert all(look.sex == "female" for look in looks)
    assert "saved" not in slugs and "gone" not in slugs


@pytest.mark.asyncio
async def test_tags_only_wardrobe_sourced_looks(session):
    user = await seed_scenario_a(session)
    looks = await FeedService(FakeRecommender(["a", "b"])).feed(session, user, 0)

    flags = {look.slug: look.is_from_wardrobe for look in looks}
    assert flags == {"a": False, "b": False, "w1": True, "w2": True, "w3": True}


@pytest.mark.asyncio
async def test_recommended_wardrobe_look_is_not_repeated(session):
    user = await seed_scenario_a(session)
    looks = await FeedService(FakeRecommender(["w1", "b"])).feed(session, user, 0)

    slugs = [look.slug for look in looks]
    assert sorted(slugs) == ["b", "w1", "w2", "w3"]
    w1 = next(look for look in looks if look.slug == "w1")
    assert w1.is_from_wardrobe is False


@pytest.mark.asyncio
async def test_non_empty_recommendation_limits_wardrobe_query(session, query_calls):
    user = await seed_scenario_a(session)
    await FeedService(FakeRecommender(["a", "b"])).feed(session, user, 3)

    assert query_calls == [{"limit": 5, "offset": 15, "exclude_slugs": ["a", "b"]}]


@pytest.mark.asyncio
async def test_empty_recommendation_switches_to_fallback(session, query_calls):
    user = await seed_scenario_a(session)
    recommender = FakeRecommender([])
    looks = await FeedService(recommender).feed(session, user, 0)

    assert query_calls == [{"limit": 20, "offset": 0, "exclude_slugs": None}]
    assert sorted(look.slug for look in looks) == ["w1", "w2", "w3"]
    assert all(look.is_from_wardrobe for look in looks)


@pytest.mark.asyncio
async def test_fallback_offset_follows_page(session, query_calls):
    user = await seed_scenario_a(session)
    recommender = FakeRecommender([])
    looks = await FeedService(recommender).feed(session, user, 2)

    assert recommender.calls == [("42", "female", 15, 30)]
    assert query_calls == [{"limit": 20, "offset": 40, "exclude_slugs": None}]
    assert looks == []


@pytest.mark.asyncio
async def test_empty_wardrobe_and_no_recommendation_is_empty_feed(session):
    user = await add_user(session, 7, "male")
    await add_look(session, 1, "m1", sex="male")
    await session.commit()

    assert await FeedService(FakeRecommender([])).feed(session, user, 0) == []


@pytest.mark.asyncio
async def test_recommender_failure_propagates(session):
    user = await seed_scenario_a(session)
    service = FeedService(FakeRecommender(error=RecommenderError("connection refused")))

    with pytest.raises(RecommenderError):
        await service.feed(session, user, 0)


@pytest.mark.asyncio
async def test_page_size_is_bounded(session):
    shirt = await add_wardrobe_item(session, 1)
    user = await add_user(session, 5, "unisex", wardrobe=[shirt])
    for i in range(1, 41):
        await add_look(session, i, f"look-{i}", sex="unisex", items=[shirt])
    await session.commit()

    recommended = [f"look-{i}" for i in range(1, 16)]
    looks = await FeedService(FakeRecommender(recommended)).feed(session, user, 0)
    assert len(looks) == 20
    assert sum(look.is_from_wardrobe for look in looks) == 5

    fallback = await FeedService(FakeRecommender([])).feed(session, user, 0)
    assert len(fallback) == 20
    assert [look.id for look in sorted(fallback, key=lambda look: -look.id)] == list(range(40, 20, -1))


@pytest.mark.asyncio
async def test_custom_limits(session, query_calls):
    user = await seed_scenario_a(session)
    config = FeedConfig(rec_limit=4, wardrobe_limit=2, fallback_limit=6)
    recommender = FakeRecommender(["a"])
    looks = await FeedService(recommender, config).feed(session, user, 1)

    assert recommender.calls == [("42", "female", 4, 4)]
    assert query_calls == [{"limit": 2, "offset": 2, "exclude_slugs": ["a"]}]
    assert sorted(look.slug for look in looks) == ["a", "w1"]


@pytest.mark.asyncio
async def test_shuffle_is_a_permutation_and_seedable(session):
    user = await seed_scenario_a(session)

    first = await FeedService(FakeRecommender(["a", "b"]), rng=random.Random(3)).feed(session, user, 0)
    second = await FeedService(FakeRecommender(["a", "b"]), rng=random.Random(3)).feed(session, user, 0)

    assert [look.slug for look in first] == [look.slug for look in second]
    assert sorted(look.slug for look in first) == ["a", "b", "w1", "w2", "w3"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "user,page",
    [
        (User(id=0, sex="female"), 0),
        (User(id=1, sex=None), 0),
        (User(id=1, sex="other"), 0),
        (User(id=1, sex="male"), -1),
    ],
)
async def test_rejects_invalid_requests(session, user, page):
    recommender = FakeRecommender(["a"])
    with pytest.raises(InvalidFeedRequest):
        await FeedService(recommender).feed(session, user, page)
    assert recommender.calls == []


@pytest.mark.asyncio
async def test_oversized_recommendation_is_truncated(session, query_calls):
    shirt = await add_wardrobe_item(session, 1)
    user = await add_user(session, 5, "unisex", wardrobe=[shirt])
    for i in range(1, 41):
        await add_look(session, i, f"look-{i}", sex="unisex", items=[shirt])
    await session.commit()

    recommended = [f"look-{i}" for i in range(1, 31)]
    looks = await FeedService(FakeRecommender(recommended)).feed(session, user, 0)

    assert len(looks) == 20
    assert sum(not look.is_from_wardrobe for look in looks) == 15
    assert query_calls[0]["exclude_slugs"] == recommended[:15]
