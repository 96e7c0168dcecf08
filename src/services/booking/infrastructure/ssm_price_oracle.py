import os
from decimal import Decimal, InvalidOperation

from aws_lambda_powertools.utilities import parameters

from services.booking.domain.enum import ErrorCode
from services.booking.domain.oracle import PriceOracle
from services.shared.domain import ApplicationError, Currency

DEFAULT_PARAMETER_PREFIX = "/booking/prices"


class SsmPriceOracle(PriceOracle):
    """SSM Parameter Store から通貨の価格（USD）を読み出すオラクル

    パラメータ名は `<prefix>/<通貨コード>`（例: /booking/prices/ETH）。
    価格の更新は外部のジョブが行う。
    """

    def __init__(self, parameter_prefix: str | None = None, max_age: int = 60) -> None:
        self.parameter_prefix = parameter_prefix or os.getenv(
            "PRICE_PARAMETER_PREFIX", DEFAULT_PARAMETER_PREFIX
        )
        self.max_age = max_age

    def current_price(self, currency: Currency) -> Decimal:
        """現在価格を返す"""
        value = parameters.get_parameter(
            f"{self.parameter_prefix}/{currency}", max_age=self.max_age
        )
        try:
            price = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ApplicationError(ErrorCode.INVALID_ETH_PRICE) from e
        if not price.is_finite() or price <= 0:
            raise ApplicationError(ErrorCode.INVALID_ETH_PRICE)
        return price
