from services.payment.domain.entity import Payment
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Caller, ForbiddenException, ResourceNotFoundException


class GetPaymentService:
    """決済取得ユースケース（本人または管理者）"""

    def __init__(self, repository: PaymentRepository) -> None:
        self._repository = repository

    def get(self, payment_id: PaymentId, caller: Caller) -> Payment:
        payment = self._repository.find_by_id(payment_id)
        if payment is None:
            raise ResourceNotFoundException(f"Payment not found: {payment_id}")
        if not caller.can_act_for(payment.user_id):
            raise ForbiddenException("Not authorized to view this payment")
        return payment
