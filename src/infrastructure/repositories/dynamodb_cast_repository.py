"""DynamoDB Cast Repository"""
from __future__ import annotations

from typing import Any

from boto3.dynamodb.conditions import Attr, Key
import structlog

from src.application.ports.repositories import ICastRepository
from src.domain.cast import CastFilter

logger = structlog.get_logger()


def build_cast_query(
    movie_id: int,
    cast_filter: CastFilter | None = None,
) -> dict[str, Any]:
    """
    Table.query に渡す引数を組み立てる

    パーティションキー movieId の等価条件に、必要なら begins_with の
    FilterExpression を1つだけ付与する。条件が無ければ FilterExpression
    キー自体を含めない。
    """
    query: dict[str, Any] = {
        "KeyConditionExpression": Key("movieId").eq(movie_id),
    }
    if cast_filter is not None:
        query["FilterExpression"] = Attr(cast_filter.attribute.value).begins_with(
            cast_filter.prefix
        )
    return query


class DynamoDBCastRepository(ICastRepository):
    """
    DynamoDB ベースの Cast Repository

    キースキーマ: movieId (PK) + ソートキー。
    ページングは行わず、1回の Query で返った分だけを扱う。
    """

    def __init__(self, table):
        self._table = table

    def find_by_movie(
        self,
        movie_id: int,
        cast_filter: CastFilter | None = None,
    ) -> list[dict[str, Any]] | None:
        log = logger.bind(table=self._table.name, movie_id=movie_id)
        log.info(
            "cast_query_started",
            filter_attribute=cast_filter.attribute.value if cast_filter else None,
        )

        response = self._table.query(**build_cast_query(movie_id, cast_filter))

        # Items が無い場合も正規化せずにそのまま返す
        items = response.get("Items")
        log.info("cast_query_completed", count=len(items) if items is not None else None)
        return items
