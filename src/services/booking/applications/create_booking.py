from collections.abc import Mapping
from typing import Any

from services.booking.applications.persistence_errors import (
    normalized_persistence_errors,
)
from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository


class CreateBookingService:
    """予約作成のユースケース"""

    def __init__(self, repository: BookingRepository, factory: BookingFactory) -> None:
        self._repository = repository
        self._factory = factory

    def create(
        self,
        booking_details: BookingDetails,
        personal_info: Mapping[str, Any],
        external_price: object = None,
    ) -> Booking:
        """予約を生成して保存する"""
        booking = self._factory.generate(booking_details, personal_info, external_price)
        with normalized_persistence_errors():
            self._repository.save(booking)
        return booking
