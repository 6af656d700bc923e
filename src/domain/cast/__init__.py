"""Cast Domain Module"""
from .value_objects.cast_filter import CastAttribute, CastFilter
from .value_objects.movie_facts import MovieFacts

__all__ = [
    "CastAttribute",
    "CastFilter",
    "MovieFacts",
]
