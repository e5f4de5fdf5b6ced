from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class Identifier:
    """文字列 ID の基底 Value Object"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls):
        """ランダムな ID を生成する"""
        return cls(value=str(uuid.uuid4()))


@dataclass(frozen=True)
class UserId(Identifier):
    """利用者ID（認証基盤から渡される）"""


@dataclass(frozen=True)
class RouteId(Identifier):
    """路線ID"""


@dataclass(frozen=True)
class BusId(Identifier):
    """車両ID"""


@dataclass(frozen=True)
class TripId(Identifier):
    """運行ID（全サービス共通）

    Value Object として不変性を保証。
    同じ値を持つ TripId は同一とみなされる。
    """
