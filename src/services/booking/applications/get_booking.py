from services.booking.applications.persistence_errors import (
    normalized_persistence_errors,
)
from services.booking.domain.entity import Booking
from services.booking.domain.enum import ErrorCode
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingHash
from services.shared.domain import ApplicationError


class GetBookingService:
    """予約ハッシュで予約を取得するユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def get(self, booking_hash: BookingHash) -> Booking:
        with normalized_persistence_errors():
            booking = self._repository.find_by_hash(booking_hash)
        if booking is None:
            raise ApplicationError(ErrorCode.NOT_FOUND)
        return booking
