from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.route.applications.register_route import RegisterRouteService
from services.route.domain.factory import RouteFactory
from services.route.handlers.request_models import RegisterRouteRequest
from services.route.handlers.response_models import to_response
from services.route.infrastructure import DynamoDBRouteRepository
from services.shared.domain import Role
from services.shared.utils import (
    api_handler,
    api_response,
    get_caller,
    parse_body,
    require_role,
)

logger = Logger()

repository = DynamoDBRouteRepository()
factory = RouteFactory()
service = RegisterRouteService(repository=repository, factory=factory)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """路線登録のLambdaハンドラー"""
    logger.info("Received register route request")

    require_role(get_caller(event), Role.ADMIN)
    request = parse_body(event, RegisterRouteRequest)

    route = service.register(
        {
            "route_number": request.route_number,
            "name": request.name,
            "origin": request.origin,
            "destination": request.destination,
            "duration_minutes": request.duration_minutes,
            "base_fare": request.base_fare,
            "currency_code": request.currency,
        }
    )
    return api_response(201, to_response(route))
