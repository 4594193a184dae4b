import os

import boto3
from boto3.dynamodb.conditions import Attr, Key

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.repository import RoomRepository
from hotel_reservation.reservation.domain.value_object import Hotel, RoomType
from hotel_reservation.shared.utils import query_all

ROOMS_INDEX = "GSI1"


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, room: Room) -> None:
        """部屋をDBに保存する"""
        item = {
            "PK": f"ROOM#{room.id}",
            "SK": "ROOM",
            "entity_type": "ROOM",
            "room_id": room.id,
            "hotel_id": room.hotel.id,
            "hotel_name": room.hotel.name,
            "room_type_id": room.room_type.id,
            "room_type_name": room.room_type.name,
            "capacity": room.room_type.capacity,
            "room_number": room.room_number,
            "GSI1PK": "ROOMS",
            "GSI1SK": f"HOTEL#{room.hotel.id}#ROOM#{room.room_number}",
        }
        if room.hotel.address:
            item["hotel_address"] = room.hotel.address
        self.table.put_item(Item=item)

    def find_by_id(self, room_id: int) -> Room | None:
        """部屋IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"ROOM#{room_id}", "SK": "ROOM"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_hotel_id(self, hotel_id: int) -> list[Room]:
        """ホテルの部屋を部屋番号順で返す"""
        items = query_all(
            self.table,
            IndexName=ROOMS_INDEX,
            KeyConditionExpression=Key("GSI1PK").eq("ROOMS")
            & Key("GSI1SK").begins_with(f"HOTEL#{hotel_id}#"),
        )
        return [self._to_entity(item) for item in items]

    def find_available_candidates(
        self, guest_count: int, hotel_id: int | None = None
    ) -> list[Room]:
        """定員とホテルで絞り込んだ部屋を返す"""
        key_condition = Key("GSI1PK").eq("ROOMS")
        if hotel_id is not None:
            key_condition = key_condition & Key("GSI1SK").begins_with(
                f"HOTEL#{hotel_id}#"
            )

        items = query_all(
            self.table,
            IndexName=ROOMS_INDEX,
            KeyConditionExpression=key_condition,
            FilterExpression=Attr("capacity").gte(guest_count),
        )
        return [self._to_entity(item) for item in items]

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Room(
            id=int(item["room_id"]),
            hotel=Hotel(
                id=int(item["hotel_id"]),
                name=item["hotel_name"],
                address=item.get("hotel_address"),
            ),
            room_type=RoomType(
                id=int(item["room_type_id"]),
                name=item["room_type_name"],
                capacity=int(item["capacity"]),
            ),
            room_number=item["room_number"],
        )
