"""Cast Value Objects"""
from .cast_filter import CastAttribute, CastFilter
from .movie_facts import MovieFacts

__all__ = ["CastAttribute", "CastFilter", "MovieFacts"]
