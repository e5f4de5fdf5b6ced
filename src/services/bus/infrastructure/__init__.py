from .dynamodb_bus_repository import DynamoDBBusRepository as DynamoDBBusRepository
