from __future__ import annotations

from pydantic import BaseModel

from services.payment.domain.entity.payment import Payment


class AmountData(BaseModel):
    base_amount: str
    taxes: str
    fees: str
    discounts: str
    total_amount: str
    currency: str


class TransactionData(BaseModel):
    transaction_id: str | None
    reference_id: str | None
    gateway_response: dict | None
    processing_time_ms: int | None


class RefundEntryData(BaseModel):
    amount: str
    reason: str
    method: str
    refunded_at: str
    transaction_id: str


class RefundData(BaseModel):
    is_refunded: bool
    refund_amount: str
    partial_refunds: list[RefundEntryData]


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    payment_id: str
    payment_number: str
    booking_id: str
    user_id: str
    amount: AmountData
    payment_method: str
    status: str
    transaction: TransactionData
    refund: RefundData
    is_refundable: bool
    refundable_amount: str
    created_at: str
    version: int


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentData


def to_response(payment: Payment) -> dict:
    """Payment エンティティをレスポンス辞書に変換する"""
    amount = payment.amount
    transaction = payment.transaction
    return SuccessResponse(
        data=PaymentData(
            payment_id=str(payment.id),
            payment_number=payment.payment_number,
            booking_id=str(payment.booking_id),
            user_id=str(payment.user_id),
            amount=AmountData(
                base_amount=str(amount.base_amount.amount),
                taxes=str(amount.taxes.amount),
                fees=str(amount.fees.amount),
                discounts=str(amount.discounts.amount),
                total_amount=str(amount.total_amount.amount),
                currency=str(amount.currency),
            ),
            payment_method=payment.method.type.value,
            status=payment.status.value,
            transaction=TransactionData(
                transaction_id=transaction.transaction_id,
                reference_id=transaction.reference_id,
                gateway_response=transaction.gateway_response,
                processing_time_ms=transaction.processing_time_ms,
            ),
            refund=RefundData(
                is_refunded=payment.is_refunded,
                refund_amount=str(payment.refunded_amount.amount),
                partial_refunds=[
                    RefundEntryData(
                        amount=str(entry.amount.amount),
                        reason=entry.reason,
                        method=entry.method,
                        refunded_at=str(entry.refunded_at),
                        transaction_id=entry.transaction_id,
                    )
                    for entry in payment.refund.entries
                ],
            ),
            is_refundable=payment.is_refundable,
            refundable_amount=str(payment.refundable_amount.amount),
            created_at=str(payment.created_at),
            version=payment.version,
        )
    ).model_dump()
