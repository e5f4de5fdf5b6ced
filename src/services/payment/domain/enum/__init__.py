from .payment_method_type import PaymentMethodType as PaymentMethodType
from .payment_status import PaymentStatus as PaymentStatus
