from .dynamodb_trip_repository import DynamoDBTripRepository as DynamoDBTripRepository
