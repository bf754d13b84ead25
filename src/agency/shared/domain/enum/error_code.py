from enum import Enum


class ErrorCode(str, Enum):
    """利用者が入力を修正すれば解消できるエラーの種別"""

    EMPTY_AMOUNT = "EMPTY_AMOUNT"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"
    UNKNOWN_SERVICE = "UNKNOWN_SERVICE"
    UNKNOWN_PAYMENT_METHOD = "UNKNOWN_PAYMENT_METHOD"
    INVALID_ROUTE = "INVALID_ROUTE"
    INVALID_DEPARTURE = "INVALID_DEPARTURE"
    NO_PAYMENT_METHOD_SELECTED = "NO_PAYMENT_METHOD_SELECTED"
