from hotel_reservation.reservation.domain.value_object import Hotel, RoomType
from hotel_reservation.shared.domain import Entity


class Room(Entity[int]):
    """部屋エンティティ

    部屋カタログが所有し、予約コアからは参照のみ行う。
    """

    def __init__(
        self,
        id: int,
        hotel: Hotel,
        room_type: RoomType,
        room_number: str,
    ) -> None:
        super().__init__(id)
        if not room_number or not room_number.strip():
            raise ValueError("Room number cannot be empty")
        self._hotel = hotel
        self._room_type = room_type
        self._room_number = room_number

    @property
    def hotel(self) -> Hotel:
        return self._hotel

    @property
    def room_type(self) -> RoomType:
        return self._room_type

    @property
    def room_number(self) -> str:
        return self._room_number

    @property
    def capacity(self) -> int:
        return self._room_type.capacity

    def can_accommodate(self, guest_count: int) -> bool:
        """指定人数を収容できるか"""
        return guest_count <= self.capacity

    def belongs_to(self, hotel_id: int) -> bool:
        return self._hotel.id == hotel_id

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, hotel={self._hotel.name!r}, room_number={self._room_number!r})"
