from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import PaymentType, RoomType
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingHash,
    BookingId,
    EncryptedPersonalInfo,
)
from services.booking.infrastructure.booking_record import BookingRecord
from services.shared.domain import DuplicateResourceException


class InMemoryBookingRepository(BookingRepository):
    """予約ハッシュの一意制約を持つインメモリのリポジトリ"""

    def __init__(self) -> None:
        self._items: dict[str, Booking] = {}

    def save(self, booking: Booking) -> None:
        BookingRecord.from_entity(booking)
        key = str(booking.booking_hash)
        if key in self._items:
            raise DuplicateResourceException(f"Booking already exists: {key}")
        self._items[key] = booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return next((b for b in self._items.values() if b.id == booking_id), None)

    def find_by_hash(self, booking_hash: BookingHash) -> Booking | None:
        return self._items.get(str(booking_hash))

    def delete_by_id(self, booking_id: BookingId) -> Booking | None:
        booking = self.find_by_id(booking_id)
        if booking is not None:
            del self._items[str(booking.booking_hash)]
        return booking


@pytest.fixture
def in_memory_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def create_booking(personal_info):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        booking_hash: str = "0xabc123",
        guest_eth_address: str = "0xe99356bde974bbe08721d77712168fa070aa8da4",
        room_type: RoomType = RoomType.DOUBLE,
        from_: int = 1,
        to: int = 2,
        payment_amount: Decimal = Decimal("0.20001"),
        payment_type: PaymentType = PaymentType.ETH,
        signature_timestamp: Decimal = Decimal("1700000000"),
        encrypted_personal_info: str | None = None,
        payment_tx: str | None = None,
    ) -> Booking:
        encrypted = (
            EncryptedPersonalInfo(value=encrypted_personal_info)
            if encrypted_personal_info is not None
            else EncryptedPersonalInfo.encode(personal_info)
        )
        return Booking(
            id=BookingId(value=booking_id),
            booking_hash=BookingHash(value=booking_hash),
            guest_eth_address=guest_eth_address,
            room_type=room_type,
            from_=from_,
            to=to,
            payment_amount=payment_amount,
            payment_type=payment_type,
            signature_timestamp=signature_timestamp,
            encrypted_personal_info=encrypted,
            payment_tx=payment_tx,
        )

    return _factory
