from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.config import get_settings
from services.shared.domain import BusId, IsoDateTime, Role, RouteId
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    require_role,
)
from services.trip.applications.schedule_trip import ScheduleTripService
from services.trip.domain.factory import TripFactory
from services.trip.handlers.request_models import ScheduleTripRequest
from services.trip.handlers.response_models import to_response

logger = Logger()

uow = DynamoDBUnitOfWork()
factory = TripFactory(seats_per_row=get_settings().SEATS_PER_ROW)
service = ScheduleTripService(uow=uow, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運行登録のLambdaハンドラー"""
    logger.info("Received schedule trip request")

    require_role(get_caller(event), Role.ADMIN)
    request = parse_body(event, ScheduleTripRequest)

    trip = service.schedule(
        route_id=RouteId(value=request.route_id),
        bus_id=BusId(value=request.bus_id),
        trip_details={
            "departure": IsoDateTime(request.departure),
            "seat_layout": (
                [
                    {"seat_number": seat.seat_number, "seat_type": seat.seat_type}
                    for seat in request.seat_layout
                ]
                if request.seat_layout
                else None
            ),
        },
    )
    return api_response(201, to_response(trip))
