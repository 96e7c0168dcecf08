from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.booking.domain.factory import BookingDetails


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル

    フィールドの検証はドメインの Validator が行うため、ここでは型を限定しない。
    bookingHash と encryptedPersonalInfo はクライアントから受け付けない。
    """

    guest_eth_address: Any = None
    room_type: Any = None
    from_: Any = Field(default=None, alias="from")
    to: Any = None
    payment_amount: Any = None
    payment_type: Any = None
    payment_tx: Any = None
    signature_timestamp: Any = None
    personal_info: Any = Field(
        default=None,
        description="個人情報（氏名、メール、生年月日、電話番号など）",
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "guestEthAddress": "0xe99356bde974bbe08721d77712168fa070aa8da4",
                    "roomType": "double",
                    "from": 1,
                    "to": 2,
                    "paymentType": "eth",
                    "personalInfo": {
                        "fullName": "Sherlock Holmes",
                        "email": "sherlock@example.com",
                        "birthDate": "1854-01-06",
                        "phone": "+44 20 7224 3688",
                    },
                }
            ]
        },
    )

    def to_booking_details(self) -> BookingDetails:
        """ドメインの入力データ構造に変換する"""
        details: BookingDetails = {
            "guest_eth_address": self.guest_eth_address,
            "room_type": self.room_type,
            "from_": self.from_,
            "to": self.to,
            "payment_type": self.payment_type,
        }
        if self.payment_amount is not None:
            details["payment_amount"] = self.payment_amount
        if self.payment_tx is not None:
            details["payment_tx"] = self.payment_tx
        if self.signature_timestamp is not None:
            details["signature_timestamp"] = self.signature_timestamp
        return details
