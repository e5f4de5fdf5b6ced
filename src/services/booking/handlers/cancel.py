from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.domain.service import CancellationPolicy
from services.booking.domain.value_object import BookingId
from services.booking.handlers.request_models import CancelBookingRequest
from services.booking.handlers.response_models import to_cancellation_response
from services.shared.config import get_settings
from services.shared.domain import IsoDateTime
from services.shared.infrastructure import EventBridgeEventPublisher
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
)

logger = Logger()

settings = get_settings()
uow = DynamoDBUnitOfWork()
policy = CancellationPolicy(settings.CANCELLATION_FEE_SCHEDULE)
publisher = EventBridgeEventPublisher()
service = CancelBookingService(
    uow=uow,
    policy=policy,
    publisher=publisher,
    max_attempts=settings.MAX_COMMIT_ATTEMPTS,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約キャンセルのLambdaハンドラー"""
    booking_id = BookingId(value=path_param(event, "booking_id"))
    logger.info("Received cancel booking request", extra={"booking_id": str(booking_id)})

    caller = get_caller(event)
    request = parse_body(event, CancelBookingRequest)

    booking = service.cancel(
        booking_id, reason=request.reason, caller=caller, now=IsoDateTime.now()
    )
    return api_response(200, to_cancellation_response(booking))
