from collections.abc import Callable
from typing import ClassVar

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.payment.domain.entity import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.applications import UnitOfWork, retry_on_conflict
from services.shared.domain import Caller, ForbiddenException, ResourceNotFoundException

logger = Logger(child=True)

# (payment, booking) を受け取り状態を変更する。変更がなければ False を返す
Transition = Callable[[Payment, Booking | None], bool]


class PaymentCommandService:
    """決済の状態遷移ユースケースの共通処理

    - 決済と予約（決済ステータスの写し）を同一トランザクションで更新する
    - 楽観ロックの競合時は最新の状態を読み直して遷移からやり直す
    """

    description: ClassVar[str]
    admin_only: ClassVar[bool] = False

    def __init__(self, uow: UnitOfWork, max_attempts: int) -> None:
        self._uow = uow
        self._max_attempts = max_attempts

    def _execute(
        self, payment_id: PaymentId, caller: Caller, transition: Transition
    ) -> Payment:
        def _attempt() -> Payment:
            with self._uow:
                payment = self._uow.payments.find_by_id(payment_id)
                if payment is None:
                    raise ResourceNotFoundException(f"Payment not found: {payment_id}")
                self._authorize(payment, caller)

                booking = self._uow.bookings.find_by_id(payment.booking_id)
                if not transition(payment, booking):
                    return payment

                self._uow.update(payment)
                if booking is not None:
                    booking.mirror_payment_status(payment.status.value)
                    self._uow.update(booking)
                self._uow.commit()
                return payment

        payment = retry_on_conflict(_attempt, self._max_attempts, self.description)
        logger.info(
            "Payment state changed",
            extra={
                "operation": self.description,
                "payment_id": str(payment_id),
                "status": payment.status.value,
            },
        )
        return payment

    def _authorize(self, payment: Payment, caller: Caller) -> None:
        if self.admin_only:
            if not caller.is_admin:
                raise ForbiddenException(f"Only admins can {self.description}")
        elif not caller.can_act_for(payment.user_id):
            raise ForbiddenException(f"Not authorized to {self.description}")
