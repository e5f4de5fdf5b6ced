from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.config import get_settings
from services.shared.domain import IsoDateTime, Role, TripId
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
    require_role,
)
from services.trip.applications.update_trip_status import UpdateTripStatusService
from services.trip.handlers.request_models import UpdateTripStatusRequest
from services.trip.handlers.response_models import to_response
from services.trip.infrastructure import DynamoDBTripRepository

logger = Logger()

repository = DynamoDBTripRepository()
service = UpdateTripStatusService(
    repository=repository, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運行ステータス更新のLambdaハンドラー"""
    trip_id = TripId(value=path_param(event, "trip_id"))
    logger.info("Received update trip status request", extra={"trip_id": str(trip_id)})

    caller = get_caller(event)
    require_role(caller, Role.ADMIN, Role.DRIVER)
    request = parse_body(event, UpdateTripStatusRequest)

    trip = service.update_status(
        trip_id=trip_id,
        new_status=request.status,
        caller=caller,
        now=IsoDateTime(datetime.now(timezone.utc)),
        delay_minutes=request.delay_minutes,
    )
    return api_response(200, to_response(trip))
