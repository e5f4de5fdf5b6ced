from services.booking.domain.entity import Booking
from services.payment.applications.payment_command import PaymentCommandService
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller, IsoDateTime


class ProcessPaymentService(PaymentCommandService):
    """決済処理ユースケース（決済代行の応答を記録して processing にする）"""

    description = "process payment"

    def process(
        self,
        payment_id: PaymentId,
        gateway_response: dict,
        caller: Caller,
        now: IsoDateTime,
    ) -> Payment:
        def _transition(payment: Payment, booking: Booking | None) -> bool:
            payment.process(gateway_response, now)
            return True

        return self._execute(payment_id, caller, _transition)
