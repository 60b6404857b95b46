from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

FeedbackType = Literal["read", "like", "dislike", "star"]


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class RecommenderItem:
    item_id: str
    categories: list[str] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    is_hidden: bool = False
    comment: str = ""
    timestamp: datetime = field(default_factory=_now)

    def to_json(self) -> dict:
        return {
            "ItemId": self.item_id,
            "IsHidden": self.is_hidden,
            "Categories": self.categories,
            "Labels": self.labels,
            "Comment": self.comment,
            "Timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class Feedback:
    feedback_type: FeedbackType
    user_id: str
    item_id: str
    timestamp: datetime = field(default_factory=_now)

    def to_json(self) -> dict:
        return {
            "FeedbackType": self.feedback_type,
            "UserId": self.user_id,
            "ItemId": self.item_id,
            "Timestamp": self.timestamp.isoformat(),
        }
