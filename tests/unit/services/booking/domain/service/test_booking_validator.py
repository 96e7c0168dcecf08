from decimal import Decimal

import pytest

from services.booking.domain.enum import ErrorCode, PaymentType, RoomType
from services.booking.domain.service import validate_booking_details
from services.shared.domain import ApplicationError


def _error_code(details):
    with pytest.raises(ApplicationError) as exc_info:
        validate_booking_details(details)
    return exc_info.value.code


class TestValidateBookingDetails:
    """入力フィールドの検証"""

    def test_valid_details(self, booking_details):
        details = validate_booking_details(booking_details)

        assert details.guest_eth_address == booking_details["guest_eth_address"]
        assert details.room_type == RoomType.DOUBLE
        assert details.from_ == 1
        assert details.to == 2
        assert details.payment_type == PaymentType.ETH
        assert details.payment_amount is None
        assert details.payment_tx is None
        assert details.signature_timestamp is None

    def test_optional_fields(self, booking_details):
        booking_details["payment_amount"] = 0.5
        booking_details["payment_tx"] = "0xtx"
        booking_details["signature_timestamp"] = 1700000000

        details = validate_booking_details(booking_details)

        assert details.payment_amount == Decimal("0.5")
        assert details.payment_tx == "0xtx"
        assert details.signature_timestamp == Decimal("1700000000")

    def test_integral_float_slots_are_accepted(self, booking_details):
        booking_details["from_"] = 2.0
        booking_details["to"] = 3.0

        details = validate_booking_details(booking_details)

        assert (details.from_, details.to) == (2, 3)

    @pytest.mark.parametrize("from_, to", [(1, 4), (1, 1), (4, 4), (2, 3)])
    def test_slot_range_accepted(self, booking_details, from_, to):
        booking_details["from_"] = from_
        booking_details["to"] = to

        details = validate_booking_details(booking_details)

        assert (details.from_, details.to) == (from_, to)

    @pytest.mark.parametrize("from_", [0, 5, -1])
    def test_from_out_of_range(self, booking_details, from_):
        booking_details["from_"] = from_
        booking_details["to"] = 4

        assert _error_code(booking_details) == ErrorCode.FROM_OUT_OF_RANGE

    @pytest.mark.parametrize("from_, to", [(3, 2), (1, 5), (2, 1)])
    def test_to_out_of_range(self, booking_details, from_, to):
        booking_details["from_"] = from_
        booking_details["to"] = to

        assert _error_code(booking_details) == ErrorCode.TO_OUT_OF_RANGE

    @pytest.mark.parametrize(
        "field, code",
        [
            ("guest_eth_address", ErrorCode.NO_GUEST_ETH_ADDRESS),
            ("room_type", ErrorCode.NO_ROOM_TYPE),
            ("from_", ErrorCode.NO_FROM),
            ("to", ErrorCode.NO_TO),
            ("payment_type", ErrorCode.NO_PAYMENT_TYPE),
        ],
    )
    def test_missing_required_field(self, booking_details, field, code):
        del booking_details[field]

        assert _error_code(booking_details) == code

    @pytest.mark.parametrize(
        "field", ["guest_eth_address", "room_type", "payment_type"]
    )
    def test_empty_string_is_missing(self, booking_details, field):
        booking_details[field] = ""

        assert _error_code(booking_details).startswith("no")

    @pytest.mark.parametrize(
        "field, value, code",
        [
            ("guest_eth_address", 123, ErrorCode.INVALID_GUEST_ETH_ADDRESS),
            ("room_type", "suite", ErrorCode.INVALID_ROOM_TYPE),
            ("from_", "1", ErrorCode.INVALID_FROM),
            ("from_", 1.5, ErrorCode.INVALID_FROM),
            ("from_", True, ErrorCode.INVALID_FROM),
            ("to", "x", ErrorCode.INVALID_TO),
            ("payment_amount", "abc", ErrorCode.INVALID_PAYMENT_AMOUNT),
            ("payment_amount", 0, ErrorCode.MIN_AMOUNT),
            ("payment_amount", -1, ErrorCode.MIN_AMOUNT),
            ("payment_type", "btc", ErrorCode.INVALID_PAYMENT_TYPE),
            ("payment_tx", 1, ErrorCode.INVALID_PAYMENT_TX),
            ("signature_timestamp", "now", ErrorCode.INVALID_SIGNATURE_TIMESTAMP),
        ],
    )
    def test_invalid_field(self, booking_details, field, value, code):
        booking_details[field] = value

        assert _error_code(booking_details) == code

    def test_only_first_failing_field_is_reported(self, booking_details):
        booking_details["from_"] = 0
        del booking_details["payment_type"]
        booking_details["payment_tx"] = 1

        assert _error_code(booking_details) == ErrorCode.FROM_OUT_OF_RANGE

    def test_address_is_checked_before_slots(self, booking_details):
        booking_details["guest_eth_address"] = None
        booking_details["to"] = 0

        assert _error_code(booking_details) == ErrorCode.NO_GUEST_ETH_ADDRESS
