from .payment_result import PaymentResult as PaymentResult
