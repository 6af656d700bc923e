"""Get Movie Cast Use Case"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

import structlog

from src.application.ports.repositories import ICastRepository, IMovieRepository
from src.domain.cast import CastFilter, MovieFacts

logger = structlog.get_logger()

MOVIE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidQueryParametersError(Exception):
    """クエリパラメータ不正エラー"""

    message = "Invalid query parameters"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class MissingParametersError(InvalidQueryParametersError):
    """クエリパラメータが1つも無い"""

    message = "Missing query parameters"


class MissingMovieIdError(InvalidQueryParametersError):
    """movieId パラメータが無い"""

    message = "Missing movie Id parameter"


class InvalidMovieIdError(InvalidQueryParametersError):
    """movieId が整数として解釈できない"""

    message = "Invalid movie Id parameter"


@dataclass
class GetMovieCastInput:
    """キャスト取得入力DTO"""

    movie_id: int
    include_facts: bool = False
    role_name: str | None = None
    actor_name: str | None = None

    @classmethod
    def from_query_parameters(
        cls, params: Mapping[str, str] | None
    ) -> GetMovieCastInput:
        """
        API Gateway のクエリ文字列パラメータから生成

        - movieId は必須（整数）
        - facts は "true" のときだけ有効
        - roleName と actorName は排他。キーが存在すれば roleName を優先する

        Raises:
            MissingParametersError: パラメータが無い
            MissingMovieIdError: movieId が無い
            InvalidMovieIdError: movieId が整数でない
        """
        if params is None:
            raise MissingParametersError()

        raw_movie_id = params.get("movieId")
        if not raw_movie_id:
            raise MissingMovieIdError()

        # int() は "5_50" や全角数字も受け付けるため ASCII の数字列に限定する
        if not isinstance(raw_movie_id, str) or not MOVIE_ID_PATTERN.fullmatch(
            raw_movie_id.strip()
        ):
            raise InvalidMovieIdError()
        movie_id = int(raw_movie_id)

        role_name = None
        actor_name = None
        if "roleName" in params:
            role_name = params["roleName"] or ""
        elif "actorName" in params:
            actor_name = params["actorName"] or ""

        return cls(
            movie_id=movie_id,
            include_facts=params.get("facts") == "true",
            role_name=role_name,
            actor_name=actor_name,
        )

    @property
    def cast_filter(self) -> CastFilter | None:
        """適用する絞り込み条件（最大1つ）"""
        if self.role_name is not None:
            return CastFilter.by_role_name(self.role_name)
        if self.actor_name is not None:
            return CastFilter.by_actor_name(self.actor_name)
        return None


@dataclass
class GetMovieCastOutput:
    """キャスト取得出力DTO"""

    cast: list[dict[str, Any]] | None
    movie: MovieFacts | None = None

    def to_dict(self) -> dict[str, Any]:
        """レスポンスボディ。movie は存在する場合のみ含める"""
        body: dict[str, Any] = {"cast": self.cast}
        if self.movie is not None:
            body["movie"] = self.movie.to_dict()
        return body


class GetMovieCastUseCase:
    """
    映画キャスト取得 ユースケース

    1. movieId でキャストを検索（絞り込み条件は最大1つ）
    2. facts が要求されていれば映画メタデータを1件取得
    3. 両者をまとめて返す

    2つの読み取りは逐次実行し、リトライは行わない。
    どちらかで例外が出ればそのまま呼び出し元へ伝播する。
    """

    def __init__(
        self,
        cast_repository: ICastRepository,
        movie_repository: IMovieRepository,
    ):
        self._cast_repo = cast_repository
        self._movie_repo = movie_repository

    def execute(self, input_data: GetMovieCastInput) -> GetMovieCastOutput:
        """ユースケースを実行"""
        cast_filter = input_data.cast_filter
        log = logger.bind(
            movie_id=input_data.movie_id,
            include_facts=input_data.include_facts,
            filter_attribute=cast_filter.attribute.value if cast_filter else None,
        )
        log.info("get_movie_cast_started")

        cast = self._cast_repo.find_by_movie(input_data.movie_id, cast_filter)
        output = GetMovieCastOutput(cast=cast)

        if input_data.include_facts:
            item = self._movie_repo.find_by_id(input_data.movie_id)
            if item:
                output.movie = MovieFacts.from_item(item)
            else:
                log.info("movie_not_found")

        log.info(
            "get_movie_cast_completed",
            cast_count=len(cast) if cast is not None else None,
            has_movie=output.movie is not None,
        )
        return output
