from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar


@dataclass(frozen=True)
class DomainEvent(ABC):
    """ドメインイベント基底クラス

    name はイベントチャネルへ発行する際のイベント名。
    """

    name: ClassVar[str]

    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), kw_only=True
    )

    @abstractmethod
    def to_payload(self) -> dict:
        """発行用のペイロードに変換する"""
        raise NotImplementedError
