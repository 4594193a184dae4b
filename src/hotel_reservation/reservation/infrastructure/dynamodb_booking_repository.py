import os
from datetime import date, datetime, timedelta

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain.exception import DuplicateResourceException
from hotel_reservation.shared.utils import query_all, scan_all

# TransactWriteItems の上限(100) から予約番号アイテムと部屋別予約アイテムを除いた泊数
MAX_TRANSACT_ITEMS = 100
MAX_NIGHTS = MAX_TRANSACT_ITEMS - 2


def _nights(stay_period: StayPeriod) -> list[date]:
    return [
        stay_period.check_in + timedelta(days=offset)
        for offset in range(stay_period.nights())
    ]


def _is_condition_check_failure(error: ClientError) -> bool:
    """条件式の不成立でトランザクションが取り消されたか

    TransactionConflict などの一時的な取消は対象外とし、呼び出し元へ送出する。
    """
    if error.response["Error"]["Code"] != "TransactionCanceledException":
        return False
    reasons = error.response.get("CancellationReasons", [])
    return any(reason.get("Code") == "ConditionalCheckFailed" for reason in reasons)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    予約1件につき以下のアイテムを1トランザクションで書き込む。

    - 予約番号アイテム  PK=BOOKING#{番号}     SK=BOOKING
    - 部屋別予約アイテム PK=ROOM#{部屋ID}      SK=BOOKING#{チェックイン日}#{番号}
    - 宿泊日ロック       PK=ROOM#{部屋ID}      SK=NIGHT#{日付}（泊数分）

    すべて attribute_not_exists(PK) 条件付きのため、予約番号の重複と
    同じ部屋の宿泊日の重なりはトランザクションの失敗として検出される。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        # NOTE: resource 経由の client は Python の型のままアイテムを渡せる
        self.client = self.dynamodb.meta.client

    def save(self, booking: Booking) -> BookingId:
        """予約をDBに保存する"""
        nights = _nights(booking.stay_period)
        if len(nights) > MAX_NIGHTS:
            raise ValueError(
                f"Stay is too long to be stored atomically (max {MAX_NIGHTS} nights)"
            )

        attributes = self._to_attributes(booking)
        items = [
            {
                **attributes,
                "PK": f"BOOKING#{booking.booking_number}",
                "SK": "BOOKING",
                "entity_type": "BOOKING",
            },
            {
                **attributes,
                **self._room_booking_key(booking),
                "entity_type": "ROOM_BOOKING",
            },
        ]
        items.extend(
            {
                **self._night_key(booking.room_id, night),
                "entity_type": "NIGHT_LOCK",
                "booking_number": str(booking.booking_number),
            }
            for night in nights
        )

        try:
            self.client.transact_write_items(
                TransactItems=[
                    {
                        "Put": {
                            "TableName": self.table_name,
                            "Item": item,
                            "ConditionExpression": "attribute_not_exists(PK)",
                        }
                    }
                    for item in items
                ]
            )
        except ClientError as e:
            if _is_condition_check_failure(e):
                raise DuplicateResourceException(
                    f"Booking conflicts with an existing booking: "
                    f"booking_number={booking.booking_number}, "
                    f"room_id={booking.room_id}"
                ) from e
            raise
        return booking.id

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        items = scan_all(
            self.table,
            FilterExpression=Attr("entity_type").eq("BOOKING")
            & Attr("booking_id").eq(str(booking_id)),
            ConsistentRead=True,
        )
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_booking_number(self, booking_number: BookingNumber) -> Booking | None:
        """予約番号で検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_number}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def exists_by_booking_number(self, booking_number: BookingNumber) -> bool:
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_number}", "SK": "BOOKING"},
            ProjectionExpression="PK",
            ConsistentRead=True,
        )
        return "Item" in response

    def has_overlap(
        self,
        room_id: int,
        stay_period: StayPeriod,
        exclude_booking_id: BookingId | None = None,
    ) -> bool:
        """同じ部屋に期間の重なる予約があるか"""
        # チェックアウト日より前にチェックインする予約だけを候補として取得する
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"ROOM#{room_id}")
            & Key("SK").between(
                "BOOKING#", f"BOOKING#{stay_period.check_out.isoformat()}"
            ),
            ConsistentRead=True,
        )
        return any(
            booking.conflicts_with(room_id, stay_period)
            for booking in map(self._to_entity, items)
            if booking.id != exclude_booking_id
        )

    def find_by_room_id(self, room_id: int) -> list[Booking]:
        """部屋の予約をチェックイン日順で返す"""
        items = query_all(
            self.table,
            KeyConditionExpression=Key("PK").eq(f"ROOM#{room_id}")
            & Key("SK").begins_with("BOOKING#"),
            ConsistentRead=True,
        )
        return [self._to_entity(item) for item in items]

    def delete_by_booking_number(self, booking_number: BookingNumber) -> bool:
        """予約と宿泊日ロックをまとめて削除する"""
        booking = self.find_by_booking_number(booking_number)
        if booking is None:
            return False

        keys = [
            {"PK": f"BOOKING#{booking_number}", "SK": "BOOKING"},
            self._room_booking_key(booking),
            *(
                self._night_key(booking.room_id, night)
                for night in _nights(booking.stay_period)
            ),
        ]
        transact_items: list[dict] = [
            {"Delete": {"TableName": self.table_name, "Key": key}} for key in keys
        ]
        transact_items[0]["Delete"]["ConditionExpression"] = "attribute_exists(PK)"

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            # 並行して削除された場合
            if _is_condition_check_failure(e):
                return False
            raise
        return True

    @staticmethod
    def _room_booking_key(booking: Booking) -> dict:
        return {
            "PK": f"ROOM#{booking.room_id}",
            "SK": (
                f"BOOKING#{booking.stay_period.check_in.isoformat()}"
                f"#{booking.booking_number}"
            ),
        }

    @staticmethod
    def _night_key(room_id: int, night: date) -> dict:
        return {"PK": f"ROOM#{room_id}", "SK": f"NIGHT#{night.isoformat()}"}

    @staticmethod
    def _to_attributes(booking: Booking) -> dict:
        return {
            "booking_id": str(booking.id),
            "booking_number": str(booking.booking_number),
            "room_id": booking.room_id,
            "check_in": booking.stay_period.check_in.isoformat(),
            "check_out": booking.stay_period.check_out.isoformat(),
            "guest_count": booking.guest_count,
            "guest_name": str(booking.guest_name),
            "created_at": booking.created_at.isoformat(),
        }

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=item["booking_id"]),
            booking_number=BookingNumber(value=item["booking_number"]),
            room_id=int(item["room_id"]),
            stay_period=StayPeriod.from_iso(item["check_in"], item["check_out"]),
            guest_count=int(item["guest_count"]),
            guest_name=GuestName(value=item["guest_name"]),
            created_at=datetime.fromisoformat(item["created_at"]),
        )
