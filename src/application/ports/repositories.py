"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.domain.cast import CastFilter


class ICastRepository(ABC):
    """
    Cast Repository Interface

    依存性逆転の原則に従い、ユースケースから参照する抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    @abstractmethod
    def find_by_movie(
        self,
        movie_id: int,
        cast_filter: CastFilter | None = None,
    ) -> list[dict[str, Any]] | None:
        """映画IDでキャストを取得（1ページ分、ストアの返却順）"""
        pass


class IMovieRepository(ABC):
    """
    Movie Repository Interface

    映画メタデータの参照を抽象化する。
    """

    @abstractmethod
    def find_by_id(self, movie_id: int) -> dict[str, Any] | None:
        """映画IDで1件取得。存在しなければ None"""
        pass
