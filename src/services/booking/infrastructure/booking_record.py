"""DynamoDB に保存する予約レコードのスキーマ

保存前と読み出し時にレコードを検証し、フィールドエラーを
FieldValidationException として報告する。
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import ErrorCode, PaymentType, RoomType
from services.booking.domain.value_object import (
    BookingHash,
    BookingId,
    EncryptedPersonalInfo,
)
from services.shared.domain import FieldError, FieldValidationException

SLOT_UPPER_BOUND = 5

_RULE_CODES = frozenset(
    {
        ErrorCode.FROM_OUT_OF_RANGE.value,
        ErrorCode.TO_OUT_OF_RANGE.value,
        ErrorCode.MIN_AMOUNT.value,
    }
)


class BookingRecord(BaseModel):
    """予約レコード（キーはクライアントと同じ camelCase）"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    booking_hash: str = Field(alias="bookingHash")
    guest_eth_address: str = Field(alias="guestEthAddress")
    room_type: RoomType = Field(alias="roomType")
    from_: int = Field(alias="from")
    to: int = Field(alias="to")
    payment_amount: Decimal = Field(alias="paymentAmount")
    payment_type: PaymentType = Field(alias="paymentType")
    payment_tx: str | None = Field(default=None, alias="paymentTx")
    signature_timestamp: Decimal = Field(alias="signatureTimestamp")
    encrypted_personal_info: str = Field(alias="encryptedPersonalInfo")

    @field_validator(
        "id",
        "booking_hash",
        "guest_eth_address",
        "room_type",
        "from_",
        "to",
        "payment_amount",
        "payment_type",
        "signature_timestamp",
        "encrypted_personal_info",
        mode="before",
    )
    @classmethod
    def reject_empty(cls, v: Any) -> Any:
        if v is None or v == "":
            raise PydanticCustomError("missing", "Field required")
        return v

    @field_validator("from_")
    @classmethod
    def check_from_range(cls, v: int) -> int:
        if not 0 < v < SLOT_UPPER_BOUND:
            raise PydanticCustomError(
                ErrorCode.FROM_OUT_OF_RANGE.value, ErrorCode.FROM_OUT_OF_RANGE.value
            )
        return v

    @field_validator("to")
    @classmethod
    def check_to_range(cls, v: int, info: ValidationInfo) -> int:
        from_ = info.data.get("from_")
        if (from_ is not None and v < from_) or v >= SLOT_UPPER_BOUND:
            raise PydanticCustomError(
                ErrorCode.TO_OUT_OF_RANGE.value, ErrorCode.TO_OUT_OF_RANGE.value
            )
        return v

    @field_validator("payment_amount")
    @classmethod
    def check_min_amount(cls, v: Decimal) -> Decimal:
        if not v > 0:
            raise PydanticCustomError(
                ErrorCode.MIN_AMOUNT.value, ErrorCode.MIN_AMOUNT.value
            )
        return v

    @classmethod
    def parse(cls, data: dict[str, Any]) -> BookingRecord:
        """辞書を検証してレコードにする"""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise FieldValidationException(to_field_errors(e)) from e

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingRecord:
        """エンティティからレコードを組み立てる"""
        return cls.parse(
            {
                "id": str(booking.id),
                "bookingHash": str(booking.booking_hash),
                "guestEthAddress": booking.guest_eth_address,
                "roomType": booking.room_type,
                "from": booking.from_,
                "to": booking.to,
                "paymentAmount": booking.payment_amount,
                "paymentType": booking.payment_type,
                "paymentTx": booking.payment_tx,
                "signatureTimestamp": booking.signature_timestamp,
                "encryptedPersonalInfo": str(booking.encrypted_personal_info),
            }
        )

    def to_item(self) -> dict[str, Any]:
        """DynamoDB アイテムの属性に変換する"""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_entity(self) -> Booking:
        """レコードをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=self.id),
            booking_hash=BookingHash(value=self.booking_hash),
            guest_eth_address=self.guest_eth_address,
            room_type=RoomType(self.room_type),
            from_=self.from_,
            to=self.to,
            payment_amount=self.payment_amount,
            payment_type=PaymentType(self.payment_type),
            signature_timestamp=self.signature_timestamp,
            encrypted_personal_info=EncryptedPersonalInfo(
                value=self.encrypted_personal_info
            ),
            payment_tx=self.payment_tx,
        )


_WIRE_NAMES = {
    name: field.alias or name for name, field in BookingRecord.model_fields.items()
}


def to_field_errors(error: ValidationError) -> list[FieldError]:
    """pydantic の ValidationError をフィールドエラーの一覧に変換する

    フィールドを特定できないエラーは含めない。
    """
    field_errors: list[FieldError] = []
    for e in error.errors():
        if not e["loc"]:
            continue
        loc = str(e["loc"][0])
        field = _WIRE_NAMES.get(loc, loc)
        if e["type"] == "missing":
            kind = "missing"
        elif e["type"] in _RULE_CODES:
            kind = "rule"
        else:
            kind = "cast"
        field_errors.append(FieldError(field=field, kind=kind, message=e["msg"]))
    return field_errors
