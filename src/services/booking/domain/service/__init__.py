from .booking_validator import (
    ValidatedBookingDetails as ValidatedBookingDetails,
)
from .booking_validator import (
    validate_booking_details as validate_booking_details,
)
from .error_normalizer import (
    normalize_persistence_error as normalize_persistence_error,
)
from .payment_calculator import PaymentCalculator as PaymentCalculator
from .personal_info import decrypt_personal_info as decrypt_personal_info
