import json

import boto3
from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from services.shared.applications import EventPublisher
from services.shared.config import get_settings

logger = Logger(child=True)


class EventBridgeEventPublisher(EventPublisher):
    """EventBridge を使用した EventPublisher の具象実装

    WebSocket 等へのファンアウトは EventBridge の購読側が担う。
    """

    def __init__(
        self, event_bus_name: str | None = None, source: str | None = None
    ) -> None:
        settings = get_settings()
        self.event_bus_name = event_bus_name or settings.EVENT_BUS_NAME
        self.source = source or settings.EVENT_SOURCE
        self.client = boto3.client("events")

    def emit(self, event_name: str, payload: dict) -> None:
        """イベントを発行する（失敗はログのみ）"""
        try:
            response = self.client.put_events(
                Entries=[
                    {
                        "Source": self.source,
                        "DetailType": event_name,
                        "Detail": json.dumps(payload, default=str),
                        "EventBusName": self.event_bus_name,
                    }
                ]
            )
        except (BotoCoreError, ClientError):
            logger.exception("Failed to publish event", extra={"event": event_name})
            return

        if response.get("FailedEntryCount"):
            logger.error(
                "Event was rejected by EventBridge",
                extra={"event": event_name, "entries": response.get("Entries")},
            )
            return

        logger.info("Published event", extra={"event": event_name})
