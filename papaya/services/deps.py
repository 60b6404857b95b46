from fastapi import Request

from papaya.recs.client import RecommenderClient
from papaya.services.feed import FeedService


def get_recommender(request: Request) -> RecommenderClient:
    return request.app.state.recommender


def get_feed_service(request: Request) -> FeedService:
    return request.app.state.feed_service
