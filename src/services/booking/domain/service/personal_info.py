from typing import Any

from services.booking.domain.entity import Booking


def decrypt_personal_info(booking: Booking) -> dict[str, Any]:
    """予約に保存された個人情報を復元する"""
    return booking.encrypted_personal_info.decode()
