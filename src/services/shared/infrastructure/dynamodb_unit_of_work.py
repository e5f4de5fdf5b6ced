import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.types import TypeSerializer
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.infrastructure import DynamoDBBookingRepository
from services.bus.domain.entity import Bus
from services.bus.infrastructure import DynamoDBBusRepository
from services.payment.domain.entity import Payment
from services.payment.infrastructure import DynamoDBPaymentRepository
from services.route.domain.entity import Route
from services.route.infrastructure import DynamoDBRouteRepository
from services.shared.applications import UnitOfWork
from services.shared.config import get_settings
from services.shared.domain import AggregateRoot, DomainException
from services.shared.domain.exception import PersistenceException
from services.shared.infrastructure.dynamodb_repository import (
    DynamoDBRepository,
    translate_conditional_failure,
)
from services.trip.domain.entity import Trip
from services.trip.infrastructure import DynamoDBTripRepository

logger = Logger(child=True)

TRANSACTION_CANCELED = "TransactionCanceledException"


class DynamoDBUnitOfWork(UnitOfWork):
    """TransactWriteItems を使用した UnitOfWork の具象実装

    登録された書き込みを各集約の条件（新規: PK 不在 / 更新: version 一致）付きの
    Put として 1 トランザクションで実行する。どれか 1 件でも条件を満たさなければ
    すべての書き込みが取り消される。
    """

    def __init__(self, table_name: str | None = None) -> None:
        super().__init__()
        self.table_name = table_name or get_settings().TABLE_NAME
        self.routes = DynamoDBRouteRepository(self.table_name)
        self.buses = DynamoDBBusRepository(self.table_name)
        self.trips = DynamoDBTripRepository(self.table_name)
        self.bookings = DynamoDBBookingRepository(self.table_name)
        self.payments = DynamoDBPaymentRepository(self.table_name)
        self._repositories: dict[type, DynamoDBRepository] = {
            Route: self.routes,
            Bus: self.buses,
            Trip: self.trips,
            Booking: self.bookings,
            Payment: self.payments,
        }
        self._client = boto3.client("dynamodb")
        self._serializer = TypeSerializer()

    def _commit(self, writes: list[tuple[AggregateRoot, bool]]) -> None:
        transact_items = [
            {"Put": self._to_transact_put(aggregate, is_new)}
            for aggregate, is_new in writes
        ]
        try:
            self._client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            raise self._translate(e, writes) from e

    def _to_transact_put(self, aggregate: AggregateRoot, is_new: bool) -> dict:
        request = self._repository_for(aggregate).put_request(aggregate, is_new)
        put = {
            "TableName": self.table_name,
            "Item": self._serialize(request["Item"]),
            "ConditionExpression": request["ConditionExpression"],
        }
        if "ExpressionAttributeNames" in request:
            put["ExpressionAttributeNames"] = request["ExpressionAttributeNames"]
        if "ExpressionAttributeValues" in request:
            put["ExpressionAttributeValues"] = self._serialize(
                request["ExpressionAttributeValues"]
            )
        return put

    def _serialize(self, values: dict) -> dict:
        return {k: self._serializer.serialize(v) for k, v in values.items()}

    def _repository_for(self, aggregate: AggregateRoot) -> DynamoDBRepository:
        try:
            return self._repositories[type(aggregate)]
        except KeyError:
            raise PersistenceException(
                f"No repository registered for {type(aggregate).__name__}"
            ) from None

    def _translate(
        self, error: ClientError, writes: list[tuple[AggregateRoot, bool]]
    ) -> DomainException:
        """トランザクションの失敗をドメイン例外に変換する

        CancellationReasons は TransactItems と同じ順序で返される。
        """
        code = error.response["Error"]["Code"]
        if code != TRANSACTION_CANCELED:
            logger.exception("Transaction failed", extra={"code": code})
            return PersistenceException(f"Transaction failed: {code}")

        reasons = error.response.get("CancellationReasons", [])
        for (aggregate, is_new), reason in zip(writes, reasons):
            reason_code = reason.get("Code")
            if reason_code in (None, "None"):
                continue
            repository = self._repository_for(aggregate)
            logger.info(
                "Transaction cancelled",
                extra={
                    "entity_type": repository.entity_type,
                    "id": str(aggregate.id),
                    "reason": reason_code,
                },
            )
            return translate_conditional_failure(
                reason_code, repository.entity_type, aggregate, is_new
            )
        return PersistenceException("Transaction cancelled without a reason")
