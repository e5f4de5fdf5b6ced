from services.booking.domain.value_object import BookingId
from services.payment.domain.enum.payment_status import PaymentStatus
from services.payment.domain.value_object import (
    PaymentAmount,
    PaymentId,
    PaymentMethod,
    PaymentTransaction,
    RefundEntry,
    RefundLedger,
)
from services.shared.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    IsoDateTime,
    Money,
    UserId,
    ValidationException,
)
from services.shared.domain.exception import (
    ExceedsRefundableException,
    NotRefundableException,
)

DEFAULT_REFUND_METHOD = "original"


class Payment(AggregateRoot[PaymentId]):
    """決済エンティティ

    - 予約 1 件につき 1 件（ID は予約 ID から決まる）
    - 払い戻しは台帳に追記し、合計が決済総額に達したら refunded
    - 物理削除はせず is_active で無効化する
    """

    def __init__(
        self,
        id: PaymentId,
        payment_number: str,
        booking_id: BookingId,
        user_id: UserId,
        amount: PaymentAmount,
        method: PaymentMethod,
        created_at: IsoDateTime,
        status: PaymentStatus = PaymentStatus.PENDING,
        transaction: PaymentTransaction | None = None,
        refund: RefundLedger | None = None,
        is_active: bool = True,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)
        self._payment_number = payment_number
        self._booking_id = booking_id
        self._user_id = user_id
        self._amount = amount
        self._method = method
        self._created_at = created_at
        self._status = status
        self._transaction = transaction or PaymentTransaction()
        self._refund = refund or RefundLedger()
        self._is_active = is_active

    @property
    def payment_number(self) -> str:
        return self._payment_number

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def amount(self) -> PaymentAmount:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def transaction(self) -> PaymentTransaction:
        return self._transaction

    @property
    def refund(self) -> RefundLedger:
        return self._refund

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def refunded_amount(self) -> Money:
        return self._refund.total(self._amount.currency)

    @property
    def is_refunded(self) -> bool:
        """全額払い戻し済みか"""
        return bool(self._refund.entries) and self.total_amount <= self.refunded_amount

    @property
    def total_amount(self) -> Money:
        return self._amount.total_amount

    @property
    def is_refundable(self) -> bool:
        """払い戻し可能か（完了済みで、払い戻し可能額が残っている）"""
        return (
            self._status in (PaymentStatus.COMPLETED, PaymentStatus.PARTIALLY_REFUNDED)
            and self.refunded_amount < self.total_amount
        )

    @property
    def refundable_amount(self) -> Money:
        if not self.is_refundable:
            return Money.zero(self._amount.currency)
        return self.total_amount.subtract(self.refunded_amount)

    def process(self, gateway_response: dict, now: IsoDateTime) -> None:
        """決済代行の応答を記録し processing にする"""
        self._ensure_open("process")
        elapsed_ms = int((now.value - self._created_at.value).total_seconds() * 1000)
        self._transaction = self._transaction.with_gateway_response(
            gateway_response, max(0, elapsed_ms)
        )
        self._status = PaymentStatus.PROCESSING

    def complete(self, transaction_id: str, reference_id: str) -> bool:
        """決済を完了する

        すでに completed の場合は何もせず False を返す。
        """
        if self._status == PaymentStatus.COMPLETED:
            return False
        self._ensure_open("complete")
        if not transaction_id:
            raise ValidationException("Transaction ID is required")
        self._transaction = self._transaction.with_ids(transaction_id, reference_id)
        self._status = PaymentStatus.COMPLETED
        return True

    def fail(self, reason: str) -> None:
        """決済を失敗にする"""
        self._ensure_open("fail")
        self._transaction = self._transaction.with_gateway_response({"error": reason})
        self._status = PaymentStatus.FAILED

    def cancel(self, reason: str) -> None:
        """決済を取り消す（pending / processing のみ）"""
        self._ensure_open("cancel")
        self._transaction = self._transaction.with_gateway_response(
            {"cancellationReason": reason}
        )
        self._status = PaymentStatus.CANCELLED

    def retry(self) -> None:
        """失敗した決済を pending に戻す（同じ ID のまま、応答は破棄）"""
        if self._status != PaymentStatus.FAILED:
            raise BusinessRuleViolationException("Payment is not failed")
        self._transaction = self._transaction.with_gateway_response(None)
        self._status = PaymentStatus.PENDING

    def process_refund(
        self,
        amount: Money,
        reason: str,
        now: IsoDateTime,
        method: str = DEFAULT_REFUND_METHOD,
    ) -> RefundEntry:
        """払い戻しを台帳に追記する（金額は通貨の補助単位に丸める）"""
        amount = amount.rounded()
        if not self.is_refundable:
            raise NotRefundableException(
                f"Payment {self.id} is not refundable (status: {self._status.value})"
            )
        if amount.amount <= 0:
            raise ValidationException("Refund amount must be positive")
        if self.refundable_amount < amount:
            raise ExceedsRefundableException(
                f"Refund amount {amount} exceeds refundable amount "
                f"{self.refundable_amount}"
            )

        entry = RefundEntry(
            amount=amount,
            reason=reason,
            method=method,
            refunded_at=now,
            transaction_id=f"REF{int(now.value.timestamp() * 1000)}",
        )
        self._refund = self._refund.append(entry)
        if self.refunded_amount < self.total_amount:
            self._status = PaymentStatus.PARTIALLY_REFUNDED
        else:
            self._status = PaymentStatus.REFUNDED
        return entry

    def deactivate(self) -> None:
        """論理削除する"""
        self._is_active = False

    def _ensure_open(self, action: str) -> None:
        if not self._status.is_open:
            raise BusinessRuleViolationException(
                f"Cannot {action} payment in {self._status.value} status"
            )
