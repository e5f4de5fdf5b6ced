from typing import Protocol, runtime_checkable


@runtime_checkable
class SoftDeletable(Protocol):
    """論理削除可能な集約

    物理削除は行わず is_active フラグで無効化する。
    Repository の検索は無効化されたレコードを明示的に除外する。
    """

    @property
    def is_active(self) -> bool: ...

    def deactivate(self) -> None: ...
