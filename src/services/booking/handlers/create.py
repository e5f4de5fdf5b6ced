from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.create_booking import (
    CreateBookingCommand,
    CreateBookingService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest
from services.booking.handlers.response_models import to_response
from services.shared.config import get_settings
from services.shared.domain import BusId, IsoDateTime, RouteId, TripId
from services.shared.infrastructure import EventBridgeEventPublisher
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import api_handler, api_response, get_caller, parse_body

logger = Logger()

uow = DynamoDBUnitOfWork()
factory = BookingFactory()
publisher = EventBridgeEventPublisher()
service = CreateBookingService(
    uow=uow,
    factory=factory,
    publisher=publisher,
    max_attempts=get_settings().MAX_COMMIT_ATTEMPTS,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約作成のLambdaハンドラー"""
    logger.info("Received create booking request")

    caller = get_caller(event)
    request = parse_body(event, CreateBookingRequest)
    logger.append_keys(trip_id=request.trip_id)

    command = CreateBookingCommand(
        user_id=caller.user_id,
        route_id=RouteId(value=request.route_id),
        bus_id=BusId(value=request.bus_id),
        trip_id=TripId(value=request.trip_id),
        passengers=[p.to_domain() for p in request.passengers],
        pickup_point=request.pickup_point.to_domain(),
        drop_point=request.drop_point.to_domain(),
        special_requests=request.special_requests,
    )
    booking = service.create(command, now=IsoDateTime.now())
    return api_response(201, to_response(booking))
