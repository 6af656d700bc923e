"""Cast Use Cases"""
from .get_movie_cast import (
    GetMovieCastInput,
    GetMovieCastOutput,
    GetMovieCastUseCase,
    InvalidMovieIdError,
    InvalidQueryParametersError,
    MissingMovieIdError,
    MissingParametersError,
)

__all__ = [
    "GetMovieCastInput",
    "GetMovieCastOutput",
    "GetMovieCastUseCase",
    "InvalidMovieIdError",
    "InvalidQueryParametersError",
    "MissingMovieIdError",
    "MissingParametersError",
]
