from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.route.applications.update_route import UpdateRouteService
from services.route.domain.value_object import RouteUpdate
from services.route.handlers.request_models import UpdateRouteRequest
from services.route.handlers.response_models import to_response
from services.route.infrastructure import DynamoDBRouteRepository
from services.shared.config import get_settings
from services.shared.domain import Role, RouteId
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    path_param,
    require_role,
)

logger = Logger()

repository = DynamoDBRouteRepository()
service = UpdateRouteService(
    repository=repository, max_attempts=get_settings().MAX_COMMIT_ATTEMPTS
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """路線更新のLambdaハンドラー"""
    route_id = RouteId(value=path_param(event, "route_id"))
    logger.info("Received update route request", extra={"route_id": str(route_id)})

    require_role(get_caller(event), Role.ADMIN)
    request = parse_body(event, UpdateRouteRequest)

    route = service.update(route_id, RouteUpdate(**request.model_dump()))
    return api_response(200, to_response(route))
