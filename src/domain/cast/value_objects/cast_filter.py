"""Cast Filter Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CastAttribute(str, Enum):
    """絞り込み可能なキャスト属性"""

    ROLE_NAME = "roleName"
    ACTOR_NAME = "actorName"


@dataclass(frozen=True)
class CastFilter:
    """
    キャスト絞り込み条件（値オブジェクト）

    指定属性の前方一致（大文字小文字を区別）を表現する。
    キー条件で取得した後にサーバ側で適用されるため、
    読み取り範囲は変わらず、返却件数のみが減る。
    """

    attribute: CastAttribute
    prefix: str

    def __post_init__(self) -> None:
        """バリデーション"""
        # "roleName" のような文字列も受け付ける
        object.__setattr__(self, "attribute", CastAttribute(self.attribute))

        if not isinstance(self.prefix, str):
            raise ValueError(f"Prefix must be a string, got {type(self.prefix).__name__}")

    @classmethod
    def by_role_name(cls, prefix: str) -> CastFilter:
        return cls(attribute=CastAttribute.ROLE_NAME, prefix=prefix)

    @classmethod
    def by_actor_name(cls, prefix: str) -> CastFilter:
        return cls(attribute=CastAttribute.ACTOR_NAME, prefix=prefix)
