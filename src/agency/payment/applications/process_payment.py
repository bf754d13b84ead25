from decimal import Decimal

from agency.context import AgencyContext
from agency.payment.domain import PaymentMethod, PaymentResult
from agency.shared.domain import ErrorCode
from agency.shared.utils.logger import get_logger

logger = get_logger()


class PaymentProcessor:
    """決済処理ユースケース（実際の決済は行わない）

    金額の妥当性は呼び出し側で検証済みであることを前提とする。
    """

    TEMPLATES: dict[PaymentMethod, str] = {
        PaymentMethod.CARD: "Payment of {amount} made by card.",
        PaymentMethod.PAYPAL: "Payment of {amount} made with PayPal.",
    }

    def __init__(self, context: AgencyContext) -> None:
        self._context = context

    def pay(self, method: PaymentMethod | None, amount: Decimal) -> PaymentResult:
        """決済する"""
        if method is None:
            logger.info("Payment attempted without a payment method")
            return PaymentResult.failure(
                ErrorCode.NO_PAYMENT_METHOD_SELECTED, "no payment method selected"
            )

        formatted = self._context.currency.format(amount)
        logger.info(
            "Payment processed", extra={"method": method.value, "amount": formatted}
        )
        return PaymentResult.success(self.TEMPLATES[method].format(amount=formatted))
