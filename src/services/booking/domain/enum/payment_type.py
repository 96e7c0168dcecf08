from enum import Enum

from services.shared.domain import Currency


class PaymentType(str, Enum):
    """支払いに使う暗号通貨"""

    ETH = "eth"
    LIF = "lif"

    @property
    def currency(self) -> Currency:
        return Currency(self.value)
