"""Movie Facts Value Object"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class MovieFacts:
    """
    映画メタデータ（値オブジェクト）

    映画アイテムのうち title / genre_ids / overview の3項目だけを保持する。
    それ以外の属性はレスポンスに含めない。
    アイテムに存在しない項目は None のまま保持し、to_dict では出力しない。
    """

    title: str | None = None
    genre_ids: tuple[int, ...] | None = None
    overview: str | None = None

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> MovieFacts:
        """DynamoDB アイテムから生成"""
        genre_ids = item.get("genre_ids")
        return cls(
            title=item.get("title"),
            genre_ids=tuple(genre_ids) if genre_ids is not None else None,
            overview=item.get("overview"),
        )

    def to_dict(self) -> dict[str, Any]:
        body = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            body[f.name] = list(value) if isinstance(value, tuple) else value
        return body
