"""DynamoDB Movie Repository"""
from __future__ import annotations

from typing import Any

import structlog

from src.application.ports.repositories import IMovieRepository

logger = structlog.get_logger()


class DynamoDBMovieRepository(IMovieRepository):
    """映画テーブル（PK: id）からの1件取得"""

    def __init__(self, table):
        self._table = table

    def find_by_id(self, movie_id: int) -> dict[str, Any] | None:
        response = self._table.get_item(Key={"id": movie_id})
        item = response.get("Item")
        logger.info(
            "movie_lookup_completed",
            table=self._table.name,
            movie_id=movie_id,
            found=item is not None,
        )
        return item
