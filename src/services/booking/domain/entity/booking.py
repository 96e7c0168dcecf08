from decimal import Decimal

from services.booking.domain.enum import PaymentType, RoomType
from services.booking.domain.value_object import (
    BookingHash,
    BookingId,
    EncryptedPersonalInfo,
)
from services.shared.domain import Entity


class Booking(Entity[BookingId]):
    """予約エンティティ

    検証やデフォルト値の決定は BookingFactory が行い、
    エンティティ自体は値を保持するだけのレコードとする。
    """

    def __init__(
        self,
        id: BookingId,
        booking_hash: BookingHash,
        guest_eth_address: str,
        room_type: RoomType,
        from_: int,
        to: int,
        payment_amount: Decimal,
        payment_type: PaymentType,
        signature_timestamp: Decimal,
        encrypted_personal_info: EncryptedPersonalInfo,
        payment_tx: str | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_hash = booking_hash
        self._guest_eth_address = guest_eth_address
        self._room_type = room_type
        self._from = from_
        self._to = to
        self._payment_amount = payment_amount
        self._payment_type = payment_type
        self._signature_timestamp = signature_timestamp
        self._encrypted_personal_info = encrypted_personal_info
        self._payment_tx = payment_tx

    @property
    def booking_hash(self) -> BookingHash:
        return self._booking_hash

    @property
    def guest_eth_address(self) -> str:
        return self._guest_eth_address

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def from_(self) -> int:
        return self._from

    @property
    def to(self) -> int:
        return self._to

    @property
    def payment_amount(self) -> Decimal:
        return self._payment_amount

    @property
    def payment_type(self) -> PaymentType:
        return self._payment_type

    @property
    def signature_timestamp(self) -> Decimal:
        return self._signature_timestamp

    @property
    def encrypted_personal_info(self) -> EncryptedPersonalInfo:
        return self._encrypted_personal_info

    @property
    def payment_tx(self) -> str | None:
        return self._payment_tx
