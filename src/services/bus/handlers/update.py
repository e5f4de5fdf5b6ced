from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.bus.applications.update_bus import UpdateBusService
from services.bus.domain.value_object import BusUpdate
from services.bus.handlers.request_models import UpdateBusRequest
from services.bus.handlers.response_models import to_response
from services.bus.infrastructure import DynamoDBBusRepository
from services.shared.config import get_settings
from services.shared.domain import BusId, Role, UserId
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
service = UpdateBusService(
    repository=repository, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """車両更新のLambdaハンドラー"""
    bus_id = BusId(value=path_param(event, "bus_id"))
    logger.info("Received update bus request", extra={"bus_id": str(bus_id)})

    require_role(get_caller(event), Role.ADMIN)
    request = parse_body(event, UpdateBusRequest)

    update = BusUpdate(
        bus_name=request.bus_name,
        bus_type=request.bus_type,
        total_seats=request.total_seats,
        amenities=(
            tuple(dict.fromkeys(request.amenities))
            if request.amenities is not None
            else None
        ),
        driver_id=UserId(value=request.driver_id) if request.driver_id else None,
        status=request.status,
    )
    bus = service.update(bus_id, update)
    return api_response(200, to_response(bus))
