from dataclasses import dataclass, field

from services.payment.domain.enum import PaymentMethodType


@dataclass(frozen=True)
class PaymentMethod:
    """支払い方法（カード下 4 桁などの補足情報を含む）"""

    type: PaymentMethodType
    details: dict[str, str] = field(default_factory=dict)
