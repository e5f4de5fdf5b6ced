from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.bus.applications.register_bus import RegisterBusService
from services.bus.domain.factory import BusFactory
from services.bus.handlers.request_models import RegisterBusRequest
from services.bus.handlers.response_models import to_response
from services.bus.infrastructure import DynamoDBBusRepository
from services.shared.domain import Role
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    require_role,
)

logger = Logger()

repository = DynamoDBBusRepository()
factory = BusFactory()
service = RegisterBusService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """車両登録のLambdaハンドラー"""
    logger.info("Received register bus request")

    require_role(get_caller(event), Role.ADMIN)
    request = parse_body(event, RegisterBusRequest)

    bus = service.register(
        {
            "bus_number": request.bus_number,
            "bus_name": request.bus_name,
            "bus_type": request.bus_type,
            "total_seats": request.total_seats,
            "amenities": request.amenities,
            "driver_id": request.driver_id,
        }
    )
    return api_response(201, to_response(bus))
