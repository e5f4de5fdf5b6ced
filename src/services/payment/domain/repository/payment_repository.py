from services.payment.domain.entity.payment import Payment
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Repository


class PaymentRepository(Repository[Payment, PaymentId]):
    """決済リポジトリのインターフェース

    予約 ID からの検索は PaymentId.from_booking_id で ID を求めて find_by_id する。
    """
