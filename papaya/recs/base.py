from typing import Protocol


class Recommender(Protocol):
    async def recommend_for_user_and_category(
        self, user_id: str, category: str, limit: int, offset: int
    ) -> list[str]:
        ...
