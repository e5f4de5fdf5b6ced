from .dynamodb_repository import DynamoDBRepository as DynamoDBRepository
from .eventbridge_event_publisher import (
    EventBridgeEventPublisher as EventBridgeEventPublisher,
)
