from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.bus.applications.update_bus_location import UpdateBusLocationService
from services.bus.domain.value_object import BusLocation
from services.bus.handlers.request_models import UpdateBusLocationRequest
from services.bus.handlers.response_models import to_response
from services.bus.infrastructure import DynamoDBBusRepository
from services.shared.config import get_settings
from services.shared.domain import BusId, IsoDateTime, Role
from services.shared.infrastructure import EventBridgeEventPublisher
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
    require_role,
)

logger = Logger()

repository = DynamoDBBusRepository()
publisher = EventBridgeEventPublisher()
service = UpdateBusLocationService(
    repository=repository,
    publisher=publisher,
    max_attempts=get_settings().MAX_COMMIT_ATTEMPTS,
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """車両位置更新のLambdaハンドラー"""
    bus_id = BusId(value=path_param(event, "bus_id"))
    logger.info("Received update bus location request", extra={"bus_id": str(bus_id)})

    caller = get_caller(event)
    require_role(caller, Role.ADMIN, Role.DRIVER)
    request = parse_body(event, UpdateBusLocationRequest)

    location = BusLocation(
        latitude=request.latitude,
        longitude=request.longitude,
        address=request.address,
        last_updated=IsoDateTime(datetime.now(timezone.utc)),
    )
    bus = service.update_location(bus_id, location, caller)
    return api_response(200, to_response(bus))
