from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class PaymentTransaction:
    """決済代行からの応答と取引 ID

    gateway_response は決済代行の応答をそのまま保持する（内容は解釈しない）。
    """

    transaction_id: str | None = None
    reference_id: str | None = None
    gateway_response: dict | None = None
    processing_time_ms: int | None = None

    def with_gateway_response(
        self, gateway_response: dict | None, processing_time_ms: int | None = None
    ) -> PaymentTransaction:
        return replace(
            self,
            gateway_response=gateway_response,
            processing_time_ms=(
                processing_time_ms
                if processing_time_ms is not None
                else self.processing_time_ms
            ),
        )

    def with_ids(self, transaction_id: str, reference_id: str) -> PaymentTransaction:
        return replace(self, transaction_id=transaction_id, reference_id=reference_id)
