import os

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingHash, BookingId
from services.booking.infrastructure.booking_record import BookingRecord
from services.shared.domain.exception.exceptions import DuplicateResourceException

RECORD_SK = "BOOKING"
BY_ID_INDEX = "GSI1"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    パーティションキーに予約ハッシュを使い、条件付き書き込みで一意性を保証する。
    レコードIDでの検索は GSI1 を使う。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        record = BookingRecord.from_entity(booking)
        item = {
            "PK": _pk(booking.booking_hash),
            "SK": RECORD_SK,
            "entity_type": "BOOKING",
            "GSI1PK": _gsi1pk(booking.id),
            "GSI1SK": RECORD_SK,
            **record.to_item(),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.booking_hash}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.query(
            IndexName=BY_ID_INDEX,
            KeyConditionExpression=Key("GSI1PK").eq(_gsi1pk(booking_id)),
        )
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_hash(self, booking_hash: BookingHash) -> Booking | None:
        """予約ハッシュで検索"""
        response = self.table.get_item(
            Key={"PK": _pk(booking_hash), "SK": RECORD_SK},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def delete_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約を削除し、削除前の予約を返す"""
        booking = self.find_by_id(booking_id)
        if booking is None:
            return None
        response = self.table.delete_item(
            Key={"PK": _pk(booking.booking_hash), "SK": RECORD_SK},
            ReturnValues="ALL_OLD",
        )
        attributes = response.get("Attributes")
        if not attributes:
            return None
        return self._to_entity(attributes)

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return BookingRecord.parse(item).to_entity()


def _pk(booking_hash: BookingHash) -> str:
    return f"BOOKING#{booking_hash}"


def _gsi1pk(booking_id: BookingId) -> str:
    return f"BOOKING_ID#{booking_id}"
