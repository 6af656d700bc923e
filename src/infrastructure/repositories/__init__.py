"""DynamoDB Repository implementations"""
from .dynamodb_cast_repository import DynamoDBCastRepository, build_cast_query
from .dynamodb_movie_repository import DynamoDBMovieRepository

__all__ = [
    "DynamoDBCastRepository",
    "DynamoDBMovieRepository",
    "build_cast_query",
]
