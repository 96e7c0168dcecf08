import time
from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any, NotRequired, TypedDict

from services.booking.domain.config import BookingConfig
from services.booking.domain.entity import Booking
from services.booking.domain.oracle import PriceOracle
from services.booking.domain.service import (
    PaymentCalculator,
    validate_booking_details,
)
from services.booking.domain.value_object import (
    BookingHash,
    BookingId,
    EncryptedPersonalInfo,
)
from services.shared.utils.validators import to_decimal


class BookingDetails(TypedDict):
    """予約の入力データ構造（TypedDict）

    値の型は検証前のため緩く扱う。
    """

    guest_eth_address: Any
    room_type: Any
    from_: Any
    to: Any
    payment_type: Any
    payment_amount: NotRequired[Any]
    payment_tx: NotRequired[Any]
    signature_timestamp: NotRequired[Any]


class BookingFactory:
    """予約エンティティを生成する Factory

    以下の順に処理し、各ステップは個別に失敗しうる。
    1. 入力フィールドの検証
    2. 署名タイムスタンプのデフォルト値の決定
    3. 個人情報のエンコード
    4. 予約ハッシュの生成
    5. 支払額の計算（支払額が指定されていない場合のみ）

    外部価格が渡されず price_oracle がある場合は、支払通貨の価格を
    オラクルから取得する。
    """

    def __init__(
        self,
        config: BookingConfig,
        calculator: PaymentCalculator | None = None,
        price_oracle: PriceOracle | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config
        self._calculator = calculator or PaymentCalculator(config)
        self._price_oracle = price_oracle
        self._clock = clock

    def generate(
        self,
        booking_details: BookingDetails,
        personal_info: Mapping[str, Any],
        external_price: object = None,
    ) -> Booking:
        """新規予約のエンティティを作成する"""
        details = validate_booking_details(booking_details)

        signature_timestamp = details.signature_timestamp
        if signature_timestamp is None:
            signature_timestamp = self.default_signature_timestamp()

        encrypted_personal_info = EncryptedPersonalInfo.encode(personal_info)
        booking_hash = BookingHash.generate(self._config.hash_algorithm)

        payment_amount = details.payment_amount
        if payment_amount is None:
            if external_price is None and self._price_oracle is not None:
                external_price = self._price_oracle.current_price(
                    details.payment_type.currency
                )
            payment_amount = self._calculator.compute_payment_amount(
                details.room_type, details.from_, details.to, external_price
            )

        return Booking(
            id=BookingId.generate(),
            booking_hash=booking_hash,
            guest_eth_address=details.guest_eth_address,
            room_type=details.room_type,
            from_=details.from_,
            to=details.to,
            payment_amount=payment_amount,
            payment_type=details.payment_type,
            signature_timestamp=signature_timestamp,
            encrypted_personal_info=encrypted_personal_info,
            payment_tx=details.payment_tx,
        )

    def default_signature_timestamp(self) -> Decimal:
        """署名期限の一部が経過した状態のタイムスタンプ（現在時刻 - 制限時間）"""
        now = to_decimal(self._clock())
        return now - self._config.signature_time_limit_minutes * 60
