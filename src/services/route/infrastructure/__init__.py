from .dynamodb_route_repository import (
    DynamoDBRouteRepository as DynamoDBRouteRepository,
)
