from aws_lambda_powertools import Logger

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId
from services.payment.domain.entity import Payment
from services.payment.domain.factory import PaymentDetails, PaymentFactory
from services.payment.domain.value_object import PaymentId
from services.shared.applications import UnitOfWork
from services.shared.domain import (
    BusinessRuleViolationException,
    Caller,
    DuplicateResourceException,
    ForbiddenException,
    IsoDateTime,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class CreatePaymentIntentService:
    """決済作成ユースケース（本人または管理者）

    予約 1 件につき決済は 1 件。既存の決済を事前に確認したうえで、
    予約 ID から決まる決済 ID を条件付きで登録する。
    """

    def __init__(self, uow: UnitOfWork, factory: PaymentFactory) -> None:
        self._uow = uow
        self._factory = factory

    def create(
        self,
        booking_id: BookingId,
        payment_details: PaymentDetails,
        caller: Caller,
        now: IsoDateTime,
    ) -> Payment:
        """決済を作成する"""
        if not payment_details["method"].type.is_online:
            raise ValidationException(
                f"Payment method not accepted online: {payment_details['method'].type.value}"
            )

        with self._uow:
            booking = self._uow.bookings.find_by_id(booking_id)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")
            if not caller.can_act_for(booking.user_id):
                raise ForbiddenException("Not authorized to pay for this booking")
            if booking.status != BookingStatus.PENDING:
                raise BusinessRuleViolationException(
                    f"Cannot pay for booking in {booking.status.value} status"
                )
            if self._uow.payments.find_by_id(PaymentId.from_booking_id(booking_id)):
                raise DuplicateResourceException(
                    "Payment already exists for this booking"
                )

            payment = self._factory.create(booking, payment_details, now)
            self._uow.add(payment)
            self._uow.commit()

        logger.info(
            "Created payment intent",
            extra={"payment_id": str(payment.id), "booking_id": str(booking_id)},
        )
        return payment
