from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller


class CancelPaymentService(PaymentCommandService):
    """決済取消ユースケース（管理者）"""

    description = "cancel payment"
    admin_only = True

    def cancel(self, payment_id: PaymentId, reason: str, caller: Caller) -> Payment:
        def _transition(payment: Payment, booking: Booking | None) -> bool:
            payment.cancel(reason)
            return True

        return self._execute(payment_id, caller, _transition)
