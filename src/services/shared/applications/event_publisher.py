from abc import ABC, abstractmethod
from collections.abc import Iterable

from services.shared.domain import DomainEvent


class EventPublisher(ABC):
    """イベントチャネルへの発行口

    fire-and-forget: 配信保証はなく、発行失敗で呼び出し元を失敗させない。
    """

    @abstractmethod
    def emit(self, event_name: str, payload: dict) -> None:
        raise NotImplementedError

    def publish(self, events: Iterable[DomainEvent]) -> None:
        """ドメインイベントをまとめて発行する"""
        for event in events:
            self.emit(event.name, event.to_payload())
