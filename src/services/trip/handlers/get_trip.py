from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.shared.domain import TripId
from services.shared.utils import api_handler, api_response, get_caller, path_param
from services.trip.applications.get_trip import GetTripService
from services.trip.handlers.response_models import to_response
from services.trip.infrastructure import DynamoDBTripRepository

logger = Logger()

repository = DynamoDBTripRepository()
service = GetTripService(repository=repository)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_handler
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """運行詳細（座席表）取得 Lambda Handler"""
    trip_id = TripId(value=path_param(event, "trip_id"))
    logger.info("Fetching trip details", extra={"trip_id": str(trip_id)})

    get_caller(event)
    trip = service.get(trip_id)
    return api_response(200, to_response(trip))
