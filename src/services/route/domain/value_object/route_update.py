from dataclasses import dataclass
from decimal import Decimal

from services.route.domain.enum import RouteStatus


@dataclass(frozen=True)
class RouteUpdate:
    """路線の更新コマンド

    変更可能な項目のみを列挙する。None の項目は変更しない。
    基本運賃の通貨は変更できない。
    """

    name: str | None = None
    duration_minutes: int | None = None
    base_fare: Decimal | None = None
    status: RouteStatus | None = None
