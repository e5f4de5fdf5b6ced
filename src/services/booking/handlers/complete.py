from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.complete_booking import CompleteBookingService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure import DynamoDBBookingRepository
from services.shared.config import get_settings
from services.shared.utils import api_handler, api_response, get_caller, path_param

logger = Logger()

repository = DynamoDBBookingRepository()
service = CompleteBookingService(
    repository=repository, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """乗車完了のLambdaハンドラー（管理者・ドライバー）"""
    booking_id = BookingId(value=path_param(event, "booking_id"))
    logger.info(
        "Received complete booking request", extra={"booking_id": str(booking_id)}
    )

    booking = service.complete(booking_id, get_caller(event))
    return api_response(200, to_response(booking))
