"""
Movie Cast Lambda Handler

GET /movies/cast?movieId=...[&facts=true][&roleName=...|&actorName=...]

- movieId でキャストを検索（roleName / actorName の前方一致で絞り込み可）
- facts=true の場合は映画メタデータ（title, genre_ids, overview）を付与
"""
from typing import Any

import structlog

from src.application.use_cases.cast import (
    GetMovieCastInput,
    GetMovieCastUseCase,
    InvalidQueryParametersError,
)
from src.infrastructure.aws import get_dynamodb_resource
from src.infrastructure.config import get_settings
from src.infrastructure.logging import configure_logging
from src.infrastructure.repositories import (
    DynamoDBCastRepository,
    DynamoDBMovieRepository,
)
from src.presentation.http import response, serialize_error

configure_logging(get_settings().log_level)
logger = structlog.get_logger()


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=get_settings().service_name,
        request_id=getattr(context, "aws_request_id", None),
    )

    logger.info("event_received", request=event)

    try:
        input_data = GetMovieCastInput.from_query_parameters(
            event.get("queryStringParameters")
        )
        output = build_use_case().execute(input_data)
        return response(200, output.to_dict())

    except InvalidQueryParametersError as e:
        logger.warning("invalid_query_parameters", error=str(e))
        # 入力エラーも既存クライアントとの互換のため 500 で返す
        return response(500, {"message": str(e)})

    except Exception as e:
        error = serialize_error(e)
        logger.exception("get_movie_cast_failed", error=error)
        return response(500, {"error": error})


def build_use_case() -> GetMovieCastUseCase:
    """共有の DynamoDB リソースからユースケースを組み立てる"""
    settings = get_settings()
    dynamodb = get_dynamodb_resource()
    return GetMovieCastUseCase(
        cast_repository=DynamoDBCastRepository(dynamodb.Table(settings.cast_table_name)),
        movie_repository=DynamoDBMovieRepository(dynamodb.Table(settings.table_name)),
    )
