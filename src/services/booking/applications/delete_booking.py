from services.booking.applications.persistence_errors import (
    normalized_persistence_errors,
)
from services.booking.domain.entity import Booking
from services.booking.domain.enum import ErrorCode
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain import ApplicationError


class DeleteBookingService:
    """予約削除のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def delete(self, booking_id: BookingId) -> Booking:
        """予約を削除し、削除した予約を返す"""
        with normalized_persistence_errors():
            booking = self._repository.delete_by_id(booking_id)
        if booking is None:
            raise ApplicationError(ErrorCode.NOT_FOUND)
        return booking
