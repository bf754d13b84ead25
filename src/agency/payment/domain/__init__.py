from .enum import PaymentMethod as PaymentMethod
from .value_object import PaymentResult as PaymentResult
