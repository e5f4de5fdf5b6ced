from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の永続化を抽象化する
    - 複数集約にまたがる書き込みは UnitOfWork を経由する
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """新規の集約を永続化する"""
        raise NotImplementedError

    @abstractmethod
    def update(self, aggregate: T) -> None:
        """既存の集約を version 条件付きで更新する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する（無効化済みは返さない）"""
        raise NotImplementedError
