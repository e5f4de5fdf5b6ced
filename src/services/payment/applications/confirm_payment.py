from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentStatus
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller, IsoDateTime, ResourceNotFoundException


class ConfirmPaymentService(PaymentCommandService):
    """決済確定ユースケース

    決済を completed にし、予約を confirmed にする唯一の経路。
    予約の状態は同じトランザクションの中で確認するため、
    キャンセルと確定が競合しても片方だけが成立する。
    すでに completed の決済に対しては何も変更せずに返す。
    """

    description = "confirm payment"

    def confirm(
        self,
        payment_id: PaymentId,
        transaction_id: str,
        caller: Caller,
        now: IsoDateTime,
    ) -> Payment:
        def _transition(payment: Payment, booking: Booking | None) -> bool:
            if payment.status == PaymentStatus.COMPLETED:
                return False
            if booking is None:
                raise ResourceNotFoundException(
                    f"Booking not found for payment: {payment.booking_id}"
                )
            booking.confirm()
            reference_id = f"ref_{int(now.value.timestamp() * 1000)}"
            return payment.complete(transaction_id, reference_id)

        return self._execute(payment_id, caller, _transition)
