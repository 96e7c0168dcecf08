from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    同一性は ID のみで判定する。属性値が異なっても ID が同じなら同じエンティティ。
    """

    def __init__(self, id: ID) -> None:
        self._id = id

    @property
    def id(self) -> ID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
