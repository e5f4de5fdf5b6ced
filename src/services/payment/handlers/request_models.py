from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.payment.domain.entity.payment import DEFAULT_REFUND_METHOD
from services.payment.domain.enum import PaymentMethodType
from services.payment.domain.factory import PaymentDetails
from services.payment.domain.value_object import PaymentMethod
from services.shared.utils import to_decimal


class PaymentMethodItem(BaseModel):
    type: PaymentMethodType
    details: dict[str, str] = Field(default_factory=dict)


class CreatePaymentIntentRequest(BaseModel):
    """決済作成リクエストモデル"""

    booking_id: str = Field(..., min_length=1)
    amount: Decimal = Field(
        ...,
        gt=0,
        description="決済金額（0より大きい値）",
    )
    taxes: Decimal = Field(default=Decimal("0"), ge=0)
    fees: Decimal = Field(default=Decimal("0"), ge=0)
    discounts: Decimal = Field(default=Decimal("0"), ge=0)
    payment_method: PaymentMethodItem

    @field_validator("amount", "taxes", "fees", "discounts", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    def to_details(self) -> PaymentDetails:
        return PaymentDetails(
            amount=self.amount,
            taxes=self.taxes,
            fees=self.fees,
            discounts=self.discounts,
            method=PaymentMethod(
                type=self.payment_method.type,
                details=dict(self.payment_method.details),
            ),
        )


class ProcessPaymentRequest(BaseModel):
    """決済処理リクエストモデル（決済代行の応答をそのまま受け取る）"""

    gateway_response: dict = Field(default_factory=dict)


class ConfirmPaymentRequest(BaseModel):
    """決済確定リクエストモデル"""

    transaction_id: str = Field(..., min_length=1)


class FailPaymentRequest(BaseModel):
    """決済失敗リクエストモデル"""

    reason: str = Field(..., min_length=1, max_length=500)


class CancelPaymentRequest(BaseModel):
    """決済取消リクエストモデル"""

    reason: str = Field(..., min_length=1, max_length=500)


class RefundPaymentRequest(BaseModel):
    """払い戻しリクエストモデル"""

    amount: Decimal = Field(..., gt=0)
    reason: str = Field(..., min_length=1, max_length=500)
    method: str = Field(default=DEFAULT_REFUND_METHOD, min_length=1)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)
