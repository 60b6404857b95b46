from papaya.services.feed.service import FeedService, InvalidFeedRequest

__all__ = ["FeedService", "InvalidFeedRequest"]
