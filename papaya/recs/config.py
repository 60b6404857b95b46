from dataclasses import dataclass


@dataclass(frozen=True)
class FeedConfig:
    rec_limit: int = 15
    wardrobe_limit: int = 5
    fallback_limit: int = 20
