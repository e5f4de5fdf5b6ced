from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.get_booking import GetBookingService
from services.booking.domain.value_object import BookingId
from services.booking.handlers.response_models import to_response
from services.booking.infrastructure import DynamoDBBookingRepository
from services.shared.utils import api_handler, api_response, get_caller, path_param

logger = Logger()

repository = DynamoDBBookingRepository()
service = GetBookingService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約詳細取得 Lambda Handler"""
    booking_id = BookingId(value=path_param(event, "booking_id"))
    logger.info("Fetching booking details", extra={"booking_id": str(booking_id)})

    booking = service.get(booking_id, get_caller(event))
    return api_response(200, to_response(booking))
