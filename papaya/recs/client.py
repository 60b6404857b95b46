from __future__ import annotations

import logging
from typing import Any

import httpx

from papaya.recs.types import Feedback, FeedbackType, RecommenderItem

logger = logging.getLogger("uvicorn.error")


class RecommenderError(Exception):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecommenderClient:
    """Async client for the gorse recommendation service.

    One instance is created at startup and shared by every request; the
    underlying ``httpx.AsyncClient`` pools connections and enforces the
    socket timeout.
    """

    def __init__(
        self,
        base_url: str,
        timeout_s: float = 10.0,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        headers = {"X-API-Key": api_key} if api_key else {}
        self.client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout_s, headers=headers)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("recommender:%s %s", method, path)
        try:
            resp = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("recommender:%s %s failed: %s", method, path, e)
            raise RecommenderError(f"recommender request failed: {e}") from e
        if resp.status_code != 200:
            logger.warning("recommender:%s %s status=%s", method, path, resp.status_code)
            raise RecommenderError(f"wrong status code - {resp.status_code}", status_code=resp.status_code)
        return resp

    async def recommend_for_user_and_category(
        self, user_id: str, category: str, limit: int, offset: int
    ) -> list[str]:
        resp = await self._request(
            "GET",
            f"/api/recommend/{user_id}/{category}",
            params={"n": limit, "offset": offset},
        )
        try:
            data = resp.json()
        except ValueError as e:
            raise RecommenderError("invalid recommender payload") from e
        # gorse answers null when it has nothing for the user
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(v, str) for v in data):
            raise RecommenderError("invalid recommender payload")
        return data

    async def insert_item(self, item: RecommenderItem) -> None:
        await self._request("POST", "/api/item", json=item.to_json())

    async def insert_feedback(self, feedback_type: FeedbackType, user_id: str, item_id: str) -> None:
        fb = Feedback(feedback_type=feedback_type, user_id=user_id, item_id=item_id)
        await self._request("POST", "/api/feedback", json=[fb.to_json()])

    async def delete_feedback(self, feedback_type: FeedbackType, user_id: str, item_id: str) -> None:
        await self._request("DELETE", f"/api/feedback/{feedback_type}/{user_id}/{item_id}")
