from enum import Enum


class PaymentMethodType(str, Enum):
    """支払い方法"""

    CREDIT_CARD = "credit-card"
    DEBIT_CARD = "debit-card"
    NET_BANKING = "net-banking"
    UPI = "upi"
    WALLET = "wallet"
    CASH = "cash"
    BANK_TRANSFER = "bank-transfer"

    @property
    def is_online(self) -> bool:
        """オンライン決済で受け付ける支払い方法か"""
        return self not in (PaymentMethodType.CASH, PaymentMethodType.BANK_TRANSFER)
