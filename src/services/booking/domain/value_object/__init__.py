from .booking_hash import BookingHash
from .booking_id import BookingId
from .encrypted_personal_info import EncryptedPersonalInfo

__all__ = ["BookingHash", "BookingId", "EncryptedPersonalInfo"]
