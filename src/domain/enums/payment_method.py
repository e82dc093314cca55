"""Payment method enumeration."""

from enum import Enum


class PaymentMethod(str, Enum):
    """E-wallet used to settle a transaction."""

    GOPAY = "GOPAY"
    SHOPEE_PAY = "SHOPEE_PAY"
