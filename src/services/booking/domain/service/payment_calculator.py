from decimal import Decimal, localcontext

from services.booking.domain.config import BookingConfig
from services.booking.domain.enum import ErrorCode, RoomType
from services.shared.domain import ApplicationError, Currency, Money
from services.shared.utils.validators import is_number, to_decimal

# 最小単位への変換前に桁が丸められないよう、割り算はこの精度で行う
UNIT_PRICE_PRECISION = 60


class PaymentCalculator:
    """支払額の計算

    基本料金（USD）を外部の価格（1通貨あたりの USD）で割って支払通貨の金額にする。
    """

    def __init__(self, config: BookingConfig) -> None:
        self._config = config

    def compute_payment_amount(
        self, room_type: RoomType, from_: int, to: int, external_price: object
    ) -> Decimal:
        """宿泊全体の支払額を計算する"""
        price = _to_positive_price(external_price)
        nights_stayed = to - from_ + 1
        base_price = self._config.base_price(room_type)
        return base_price * nights_stayed / price + self._config.payment_epsilon

    def compute_unit_price_per_night(
        self,
        room_type: RoomType,
        external_price: object,
        currency: Currency | None = None,
    ) -> int:
        """1泊あたりの料金を通貨の最小単位（wei 等）で返す"""
        price = _to_positive_price(external_price)
        with localcontext(prec=UNIT_PRICE_PRECISION):
            per_night = Money(
                amount=self._config.base_price(room_type) / price,
                currency=currency or Currency.eth(),
            )
            return per_night.to_smallest_unit()


def _to_positive_price(external_price: object) -> Decimal:
    if not is_number(external_price):
        raise ApplicationError(ErrorCode.INVALID_ETH_PRICE)
    price = to_decimal(external_price)
    if price <= 0:
        raise ApplicationError(ErrorCode.INVALID_ETH_PRICE)
    return price
