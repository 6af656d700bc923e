"""Application Ports (Interfaces)"""
from .repositories import ICastRepository, IMovieRepository

__all__ = [
    "ICastRepository",
    "IMovieRepository",
]
