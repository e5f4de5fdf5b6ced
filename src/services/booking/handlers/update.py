from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.update_booking import UpdateBookingService
from services.booking.domain.value_object import BookingId, BookingUpdate
from services.booking.handlers.request_models import UpdateBookingRequest
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure import DynamoDBBookingRepository
from services.shared.config import get_settings
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
)

logger = Logger()

repository = DynamoDBBookingRepository()
service = UpdateBookingService(
    repository=repository, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約更新のLambdaハンドラー"""
    booking_id = BookingId(value=path_param(event, "booking_id"))
    logger.info("Received update booking request", extra={"booking_id": str(booking_id)})

    caller = get_caller(event)
    request = parse_body(event, UpdateBookingRequest)

    update = BookingUpdate(
        passengers=(
            tuple(p.to_domain() for p in request.passengers)
            if request.passengers is not None
            else None
        ),
        pickup_point=request.pickup_point.to_domain() if request.pickup_point else None,
        drop_point=request.drop_point.to_domain() if request.drop_point else None,
        special_requests=request.special_requests,
    )
    booking = service.update(booking_id, update, caller)
    return api_response(200, to_response(booking))
