from .entity import Payment as Payment
from .enum import PaymentMethodType as PaymentMethodType
from .enum import PaymentStatus as PaymentStatus
from .factory import PaymentFactory as PaymentFactory
from .repository import PaymentRepository as PaymentRepository
from .value_object import PaymentAmount as PaymentAmount
from .value_object import PaymentId as PaymentId
from .value_object import PaymentMethod as PaymentMethod
