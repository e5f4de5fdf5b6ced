from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    - version は楽観ロック用。永続化されるたびに 1 ずつ進む（未保存は 0）
    """

    def __init__(self, id: ID, version: int = 0) -> None:
        super().__init__(id)
        self._version = version
        self._domain_events: list = []

    @property
    def version(self) -> int:
        return self._version

    @property
    def is_new(self) -> bool:
        return self._version == 0

    def mark_persisted(self) -> None:
        """永続化成功後に version を進める"""
        self._version += 1

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list:
        """ドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
