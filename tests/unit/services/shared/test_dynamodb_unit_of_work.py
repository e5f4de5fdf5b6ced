from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from services.shared.domain import (
    DuplicateResourceException,
    OptimisticLockException,
)
from services.shared.domain.exception import PersistenceException
from services.shared.infrastructure.dynamodb_unit_of_work import DynamoDBUnitOfWork


def _cancelled(*codes: str) -> ClientError:
    return ClientError(
        {
            "Error": {"Code": "TransactionCanceledException", "Message": "cancelled"},
            "CancellationReasons": [{"Code": code} for code in codes],
        },
        "TransactWriteItems",
    )


@pytest.fixture
def dynamodb_uow():
    """boto3 をモックした DynamoDBUnitOfWork"""
    with (
        patch("services.shared.infrastructure.dynamodb_repository.boto3"),
        patch("services.shared.infrastructure.dynamodb_unit_of_work.boto3") as boto3,
    ):
        client = MagicMock()
        boto3.client.return_value = client
        uow = DynamoDBUnitOfWork(table_name="TestTable")
        yield uow, client


class TestDynamoDBUnitOfWork:
    def test_commit_writes_all_aggregates_in_one_transaction(
        self, dynamodb_uow, create_booking, create_trip, create_bus
    ):
        uow, client = dynamodb_uow
        booking = create_booking()
        trip = create_trip()
        trip.mark_persisted()
        bus = create_bus()
        bus.mark_persisted()

        with uow:
            uow.add(booking)
            uow.update(trip)
            uow.update(bus)
            uow.commit()

        client.transact_write_items.assert_called_once()
        items = client.transact_write_items.call_args.kwargs["TransactItems"]
        assert len(items) == 3
        booking_put, trip_put, bus_put = (item["Put"] for item in items)
        assert booking_put["TableName"] == "TestTable"
        assert booking_put["ConditionExpression"] == "attribute_not_exists(PK)"
        assert booking_put["Item"]["PK"] == {"S": "BOOKING#booking-1"}
        assert booking_put["Item"]["GSI1PK"] == {"S": "USER#user-1"}
        assert booking_put["Item"]["GSI1SK"]["S"].startswith("BOOKING#2026-01-01")
        assert "GSI1PK" not in trip_put["Item"]
        assert trip_put["ConditionExpression"] == "#version = :expected_version"
        assert trip_put["ExpressionAttributeValues"] == {
            ":expected_version": {"N": "1"}
        }
        assert trip_put["Item"]["version"] == {"N": "2"}
        assert bus_put["Item"]["PK"] == {"S": "BUS#bus-1"}
        assert (booking.version, trip.version, bus.version) == (1, 2, 2)

    def test_version_mismatch_is_optimistic_lock(
        self, dynamodb_uow, create_booking, create_trip
    ):
        uow, client = dynamodb_uow
        client.transact_write_items.side_effect = _cancelled(
            "None", "ConditionalCheckFailed"
        )
        booking = create_booking()
        trip = create_trip()
        trip.mark_persisted()

        with uow:
            uow.add(booking)
            uow.update(trip)
            with pytest.raises(OptimisticLockException):
                uow.commit()

        assert booking.version == 0
        assert trip.version == 1

    def test_existing_key_on_insert_is_duplicate(self, dynamodb_uow, create_payment):
        uow, client = dynamodb_uow
        client.transact_write_items.side_effect = _cancelled("ConditionalCheckFailed")

        with uow:
            uow.add(create_payment())
            with pytest.raises(DuplicateResourceException):
                uow.commit()

    def test_transaction_conflict_is_optimistic_lock(self, dynamodb_uow, create_bus):
        uow, client = dynamodb_uow
        client.transact_write_items.side_effect = _cancelled("TransactionConflict")
        bus = create_bus()
        bus.mark_persisted()

        with uow:
            uow.update(bus)
            with pytest.raises(OptimisticLockException):
                uow.commit()

    def test_other_failures_are_persistence_errors(self, dynamodb_uow, create_bus):
        uow, client = dynamodb_uow
        client.transact_write_items.side_effect = ClientError(
            {"Error": {"Code": "ProvisionedThroughputExceededException"}},
            "TransactWriteItems",
        )

        with uow:
            uow.add(create_bus())
            with pytest.raises(PersistenceException):
                uow.commit()

    def test_pending_writes_are_discarded_on_exit(self, dynamodb_uow, create_bus):
        uow, client = dynamodb_uow

        with uow:
            uow.add(create_bus())

        uow.commit()
        client.transact_write_items.assert_not_called()
