from enum import Enum


class PaymentStatus(str, Enum):
    """決済ステータス

    pending -> processing -> completed
    pending | processing -> failed | cancelled
    completed -> refunded | partially-refunded
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially-refunded"

    @property
    def is_open(self) -> bool:
        """未確定（完了・失敗・取消の前）か"""
        return self in (PaymentStatus.PENDING, PaymentStatus.PROCESSING)
