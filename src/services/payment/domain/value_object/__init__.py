from .payment_amount import PaymentAmount as PaymentAmount
from .payment_id import PaymentId as PaymentId
from .payment_method import PaymentMethod as PaymentMethod
from .payment_transaction import PaymentTransaction as PaymentTransaction
from .refund_ledger import RefundEntry as RefundEntry
from .refund_ledger import RefundLedger as RefundLedger
