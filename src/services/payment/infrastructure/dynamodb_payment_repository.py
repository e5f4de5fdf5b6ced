from decimal import Decimal

from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethodType, PaymentStatus
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import (
    PaymentAmount,
    PaymentId,
    PaymentMethod,
    PaymentTransaction,
    RefundEntry,
    RefundLedger,
)
from services.shared.domain import Currency, IsoDateTime, Money, UserId
from services.shared.infrastructure import DynamoDBRepository
from services.shared.infrastructure.dynamodb_repository import METADATA, as_int


def _plain(value):
    """DynamoDB の Decimal をネイティブ型に戻す（決済代行の応答用）"""
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value


def _dynamo(value):
    """float を Decimal に変換する（DynamoDB は float を受け付けない）"""
    if isinstance(value, dict):
        return {k: _dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_dynamo(v) for v in value]
    if isinstance(value, float):
        return Decimal(str(value))
    return value


class DynamoDBPaymentRepository(DynamoDBRepository[Payment, PaymentId], PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装"""

    entity_type = "PAYMENT"

    def _key(self, id: PaymentId) -> dict:
        return {"PK": f"PAYMENT#{id}", "SK": METADATA}

    def _to_item(self, payment: Payment) -> dict:
        amount = payment.amount
        transaction = payment.transaction
        return {
            "payment_id": str(payment.id),
            "payment_number": payment.payment_number,
            "booking_id": str(payment.booking_id),
            "user_id": str(payment.user_id),
            "base_amount": str(amount.base_amount.amount),
            "taxes": str(amount.taxes.amount),
            "fees": str(amount.fees.amount),
            "discounts": str(amount.discounts.amount),
            "total_amount": str(amount.total_amount.amount),
            "currency": str(amount.currency),
            "method_type": payment.method.type.value,
            "method_details": dict(payment.method.details),
            "status": payment.status.value,
            "transaction": {
                "transaction_id": transaction.transaction_id,
                "reference_id": transaction.reference_id,
                "gateway_response": _dynamo(transaction.gateway_response),
                "processing_time_ms": transaction.processing_time_ms,
            },
            "refund": {
                "is_refunded": payment.is_refunded,
                "refund_amount": str(payment.refunded_amount.amount),
                "partial_refunds": [
                    {
                        "amount": str(entry.amount.amount),
                        "reason": entry.reason,
                        "method": entry.method,
                        "refunded_at": str(entry.refunded_at),
                        "transaction_id": entry.transaction_id,
                    }
                    for entry in payment.refund.entries
                ],
            },
            "created_at": str(payment.created_at),
            "is_active": payment.is_active,
        }

    def _to_entity(self, item: dict) -> Payment:
        currency = Currency(item["currency"])
        transaction = item.get("transaction") or {}
        refund = item.get("refund") or {}
        processing_time = transaction.get("processing_time_ms")
        return Payment(
            id=PaymentId(value=item["payment_id"]),
            payment_number=item["payment_number"],
            booking_id=BookingId(value=item["booking_id"]),
            user_id=UserId(value=item["user_id"]),
            amount=PaymentAmount.of(
                base_amount=Decimal(item["base_amount"]),
                currency=currency,
                taxes=Decimal(item["taxes"]),
                fees=Decimal(item["fees"]),
                discounts=Decimal(item["discounts"]),
            ),
            method=PaymentMethod(
                type=PaymentMethodType(item["method_type"]),
                details=item.get("method_details") or {},
            ),
            created_at=IsoDateTime.from_string(item["created_at"]),
            status=PaymentStatus(item["status"]),
            transaction=PaymentTransaction(
                transaction_id=transaction.get("transaction_id"),
                reference_id=transaction.get("reference_id"),
                gateway_response=_plain(transaction.get("gateway_response")),
                processing_time_ms=(
                    as_int(processing_time) if processing_time is not None else None
                ),
            ),
            refund=RefundLedger(
                entries=tuple(
                    RefundEntry(
                        amount=Money(Decimal(entry["amount"]), currency),
                        reason=entry["reason"],
                        method=entry["method"],
                        refunded_at=IsoDateTime.from_string(entry["refunded_at"]),
                        transaction_id=entry["transaction_id"],
                    )
                    for entry in refund.get("partial_refunds", [])
                )
            ),
            is_active=item.get("is_active", True),
            version=as_int(item["version"]),
        )
