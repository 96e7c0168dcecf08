from .config import BookingConfig
from .entity import Booking
from .enum import ErrorCode, PaymentType, RoomType
from .factory import BookingDetails, BookingFactory
from .oracle import PriceOracle
from .repository import BookingRepository
from .service import (
    PaymentCalculator,
    decrypt_personal_info,
    normalize_persistence_error,
)
from .value_object import BookingHash, BookingId, EncryptedPersonalInfo

__all__ = [
    "Booking",
    "BookingConfig",
    "BookingDetails",
    "BookingFactory",
    "BookingHash",
    "BookingId",
    "BookingRepository",
    "EncryptedPersonalInfo",
    "ErrorCode",
    "PaymentCalculator",
    "PaymentType",
    "PriceOracle",
    "RoomType",
    "decrypt_personal_info",
    "normalize_persistence_error",
]
