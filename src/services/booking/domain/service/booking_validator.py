"""予約の入力フィールドの検証

フィールドごとの検証関数と、それらをスキーマ順に適用する
validate_booking_details を提供する。最初に失敗したフィールドの
エラーコードだけを送出し、複数のエラーを集約することはしない。
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal

from services.booking.domain.enum import ErrorCode, PaymentType, RoomType
from services.shared.domain import ApplicationError
from services.shared.utils.validators import is_number, to_decimal

SLOT_UPPER_BOUND = 5


@dataclass(frozen=True)
class ValidatedBookingDetails:
    """検証済みの入力値"""

    guest_eth_address: str
    room_type: RoomType
    from_: int
    to: int
    payment_amount: Decimal | None
    payment_type: PaymentType
    payment_tx: str | None
    signature_timestamp: Decimal | None


def _is_missing(value: object) -> bool:
    return value is None or value == ""


def _to_int(value: object) -> int | None:
    if not is_number(value):
        return None
    number = to_decimal(value)
    if number != number.to_integral_value():
        return None
    return int(number)


def validate_guest_eth_address(value: object) -> str:
    if _is_missing(value):
        raise ApplicationError(ErrorCode.NO_GUEST_ETH_ADDRESS)
    if not isinstance(value, str):
        raise ApplicationError(ErrorCode.INVALID_GUEST_ETH_ADDRESS)
    return value


def validate_room_type(value: object) -> RoomType:
    if _is_missing(value):
        raise ApplicationError(ErrorCode.NO_ROOM_TYPE)
    try:
        return RoomType(value)
    except ValueError as e:
        raise ApplicationError(ErrorCode.INVALID_ROOM_TYPE) from e


def validate_from(value: object) -> int:
    if value is None:
        raise ApplicationError(ErrorCode.NO_FROM)
    from_ = _to_int(value)
    if from_ is None:
        raise ApplicationError(ErrorCode.INVALID_FROM)
    if not 0 < from_ < SLOT_UPPER_BOUND:
        raise ApplicationError(ErrorCode.FROM_OUT_OF_RANGE)
    return from_


def validate_to(value: object, from_: int) -> int:
    """to は同じレコードの from 以上でなければならない"""
    if value is None:
        raise ApplicationError(ErrorCode.NO_TO)
    to = _to_int(value)
    if to is None:
        raise ApplicationError(ErrorCode.INVALID_TO)
    if not from_ <= to < SLOT_UPPER_BOUND:
        raise ApplicationError(ErrorCode.TO_OUT_OF_RANGE)
    return to


def validate_payment_amount(value: object) -> Decimal | None:
    """支払額は任意入力。指定された場合のみ検証する"""
    if value is None:
        return None
    if not is_number(value):
        raise ApplicationError(ErrorCode.INVALID_PAYMENT_AMOUNT)
    amount = to_decimal(value)
    if amount <= 0:
        raise ApplicationError(ErrorCode.MIN_AMOUNT)
    return amount


def validate_payment_type(value: object) -> PaymentType:
    if _is_missing(value):
        raise ApplicationError(ErrorCode.NO_PAYMENT_TYPE)
    try:
        return PaymentType(value)
    except ValueError as e:
        raise ApplicationError(ErrorCode.INVALID_PAYMENT_TYPE) from e


def validate_payment_tx(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ApplicationError(ErrorCode.INVALID_PAYMENT_TX)
    return value


def validate_signature_timestamp(value: object) -> Decimal | None:
    if value is None:
        return None
    if not is_number(value):
        raise ApplicationError(ErrorCode.INVALID_SIGNATURE_TIMESTAMP)
    return to_decimal(value)


def validate_booking_details(details: Mapping[str, object]) -> ValidatedBookingDetails:
    """入力値をスキーマ順に検証する"""
    guest_eth_address = validate_guest_eth_address(details.get("guest_eth_address"))
    room_type = validate_room_type(details.get("room_type"))
    from_ = validate_from(details.get("from_"))
    to = validate_to(details.get("to"), from_)
    payment_amount = validate_payment_amount(details.get("payment_amount"))
    payment_type = validate_payment_type(details.get("payment_type"))
    payment_tx = validate_payment_tx(details.get("payment_tx"))
    signature_timestamp = validate_signature_timestamp(
        details.get("signature_timestamp")
    )
    return ValidatedBookingDetails(
        guest_eth_address=guest_eth_address,
        room_type=room_type,
        from_=from_,
        to=to,
        payment_amount=payment_amount,
        payment_type=payment_type,
        payment_tx=payment_tx,
        signature_timestamp=signature_timestamp,
    )
