from .process_payment import PaymentProcessor as PaymentProcessor
