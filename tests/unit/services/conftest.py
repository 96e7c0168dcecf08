from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.config import BookingConfig
from services.booking.domain.enum import RoomType


@pytest.fixture
def booking_config():
    """全テスト共通の BookingConfig フィクスチャ"""
    return BookingConfig(
        signature_time_limit_minutes=30,
        room_type_prices={
            RoomType.DOUBLE: Decimal("100"),
            RoomType.TWIN: Decimal("80"),
        },
        payment_epsilon=Decimal("0.00001"),
    )


@pytest.fixture
def personal_info():
    """ゲストの個人情報フィクスチャ"""
    return {
        "fullName": "Sherlock Holmes",
        "email": "sherlock@example.com",
        "birthDate": "1854-01-06",
        "phone": "+44 20 7224 3688",
    }


@pytest.fixture
def booking_details():
    """予約の入力値フィクスチャ"""
    return {
        "guest_eth_address": "0xe99356bde974bbe08721d77712168fa070aa8da4",
        "room_type": "double",
        "from_": 1,
        "to": 2,
        "payment_type": "eth",
    }


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
