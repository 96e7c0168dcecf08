from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum import ErrorCode
from services.booking.domain.service import decrypt_personal_info
from services.shared.domain import ApplicationError
from services.shared.utils import error_response

ERROR_STATUS_CODES: dict[str, int] = {
    ErrorCode.NOT_FOUND.value: 404,
    ErrorCode.DUPLICATE_BOOKING.value: 409,
}
DEFAULT_ERROR_STATUS_CODE = 422


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    booking_hash: str
    guest_eth_address: str
    room_type: str
    from_: int = Field(alias="from")
    to: int
    payment_amount: str
    payment_type: str
    payment_tx: str | None = None
    signature_timestamp: float
    personal_info: dict[str, Any]


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: BookingData


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する

    個人情報は復元して返す。
    """
    return SuccessResponse(
        data=BookingData(
            id=str(booking.id),
            booking_hash=str(booking.booking_hash),
            guest_eth_address=booking.guest_eth_address,
            room_type=booking.room_type.value,
            from_=booking.from_,
            to=booking.to,
            payment_amount=str(booking.payment_amount),
            payment_type=booking.payment_type.value,
            payment_tx=booking.payment_tx,
            signature_timestamp=float(booking.signature_timestamp),
            personal_info=decrypt_personal_info(booking),
        )
    ).model_dump(by_alias=True)


def to_error_response(error: ApplicationError) -> dict:
    """ApplicationError を HTTP レスポンスに変換する"""
    status_code = ERROR_STATUS_CODES.get(error.code, DEFAULT_ERROR_STATUS_CODE)
    return error_response(status_code, error.code, str(error))
