from abc import ABC, abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object import BookingHash, BookingId


class BookingRepository(ABC):
    """予約リポジトリのインターフェース

    予約ハッシュの一意性はリポジトリの実装が保証する。
    重複時は DuplicateResourceException、フィールドの検証に失敗した場合は
    FieldValidationException を送出する。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """予約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_hash(self, booking_hash: BookingHash) -> Booking | None:
        """予約ハッシュで検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約を削除し、削除した予約を返す"""
        raise NotImplementedError
