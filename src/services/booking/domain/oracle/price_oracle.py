from abc import ABC, abstractmethod
from decimal import Decimal

from services.shared.domain import Currency


class PriceOracle(ABC):
    """外部の価格オラクルのインターフェース"""

    @abstractmethod
    def current_price(self, currency: Currency) -> Decimal:
        """1通貨あたりの現在価格（USD）を返す"""
        raise NotImplementedError
