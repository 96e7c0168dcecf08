from enum import Enum


class ErrorCode(str, Enum):
    """アプリケーションエラーコード（閉じた語彙）"""

    # 必須フィールドの欠落
    NO_BOOKING_HASH = "noBookingHash"
    NO_GUEST_ETH_ADDRESS = "noGuestEthAddress"
    NO_ROOM_TYPE = "noRoomType"
    NO_FROM = "noFrom"
    NO_TO = "noTo"
    NO_PAYMENT_AMOUNT = "noPaymentAmount"
    NO_PAYMENT_TYPE = "noPaymentType"
    NO_SIGNATURE_TIMESTAMP = "noSignatureTimestamp"
    NO_ENCRYPTED_PERSONAL_INFO = "noEncryptedPersonalInfo"

    # 範囲外
    FROM_OUT_OF_RANGE = "fromOutOfRange"
    TO_OUT_OF_RANGE = "toOutOfRange"
    MIN_AMOUNT = "minAmount"

    # 型の不一致
    INVALID_BOOKING_HASH = "invalidBookingHash"
    INVALID_GUEST_ETH_ADDRESS = "invalidGuestEthAddress"
    INVALID_ROOM_TYPE = "invalidRoomType"
    INVALID_FROM = "invalidFrom"
    INVALID_TO = "invalidTo"
    INVALID_PAYMENT_AMOUNT = "invalidPaymentAmount"
    INVALID_PAYMENT_TYPE = "invalidPaymentType"
    INVALID_PAYMENT_TX = "invalidPaymentTx"
    INVALID_SIGNATURE_TIMESTAMP = "invalidSignatureTimestamp"
    INVALID_ENCRYPTED_PERSONAL_INFO = "invalidEncryptedPersonalInfo"

    # ドメインエラー
    INVALID_PERSONAL_INFO = "invalidPersonalInfo"
    INVALID_ETH_PRICE = "invalidEthPrice"
    DUPLICATE_BOOKING = "duplicateBooking"
    NOT_FOUND = "notFound"

    @classmethod
    def missing(cls, field: str) -> "ErrorCode":
        """no<Field> のコードを返す"""
        return cls(f"no{_capitalize(field)}")

    @classmethod
    def invalid(cls, field: str) -> "ErrorCode":
        """invalid<Field> のコードを返す"""
        return cls(f"invalid{_capitalize(field)}")


def _capitalize(field: str) -> str:
    return field[:1].upper() + field[1:]
