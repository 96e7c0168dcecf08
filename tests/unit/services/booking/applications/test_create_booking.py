from decimal import Decimal

import pytest

from services.booking.applications.create_booking import CreateBookingService
from services.booking.domain.enum import ErrorCode
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import BookingHash
from services.shared.domain import (
    ApplicationError,
    DuplicateResourceException,
    FieldError,
    FieldValidationException,
)


@pytest.fixture
def factory(booking_config):
    return BookingFactory(config=booking_config)


class TestCreateBookingService:
    """予約作成ユースケース"""

    def test_create_saves_booking(
        self, mock_repository, factory, booking_details, personal_info
    ):
        service = CreateBookingService(repository=mock_repository, factory=factory)

        booking = service.create(booking_details, personal_info, external_price=1000)

        mock_repository.save.assert_called_once_with(booking)
        assert booking.payment_amount == Decimal("0.20001")

    def test_validation_error_skips_save(
        self, mock_repository, factory, booking_details, personal_info
    ):
        service = CreateBookingService(repository=mock_repository, factory=factory)
        booking_details["to"] = 0

        with pytest.raises(ApplicationError) as exc_info:
            service.create(booking_details, personal_info, external_price=1000)

        assert exc_info.value.code == ErrorCode.TO_OUT_OF_RANGE
        mock_repository.save.assert_not_called()

    def test_duplicate_hash_becomes_duplicate_booking(
        self, monkeypatch, in_memory_repository, factory, booking_details, personal_info
    ):
        monkeypatch.setattr(
            BookingHash,
            "generate",
            classmethod(lambda cls, algorithm="sha3_256": cls(value="0xduplicate")),
        )
        service = CreateBookingService(repository=in_memory_repository, factory=factory)
        service.create(booking_details, personal_info, external_price=1000)

        with pytest.raises(ApplicationError) as exc_info:
            service.create(booking_details, personal_info, external_price=1000)

        assert exc_info.value.code == ErrorCode.DUPLICATE_BOOKING
        assert isinstance(exc_info.value.__cause__, DuplicateResourceException)

    def test_field_errors_from_storage_are_normalized(
        self, mock_repository, factory, booking_details, personal_info
    ):
        mock_repository.save.side_effect = FieldValidationException(
            [FieldError("from", "cast", "Input should be a valid integer")]
        )
        service = CreateBookingService(repository=mock_repository, factory=factory)

        with pytest.raises(ApplicationError) as exc_info:
            service.create(booking_details, personal_info, external_price=1000)

        assert exc_info.value.code == "invalidFrom"

    def test_unrecognized_storage_errors_pass_through(
        self, mock_repository, factory, booking_details, personal_info
    ):
        original = FieldValidationException([FieldError("unknown", "cast", "x")])
        mock_repository.save.side_effect = original
        service = CreateBookingService(repository=mock_repository, factory=factory)

        with pytest.raises(FieldValidationException) as exc_info:
            service.create(booking_details, personal_info, external_price=1000)

        assert exc_info.value is original

    def test_infrastructure_errors_propagate(
        self, mock_repository, factory, booking_details, personal_info
    ):
        mock_repository.save.side_effect = RuntimeError("connection reset")
        service = CreateBookingService(repository=mock_repository, factory=factory)

        with pytest.raises(RuntimeError):
            service.create(booking_details, personal_info, external_price=1000)
