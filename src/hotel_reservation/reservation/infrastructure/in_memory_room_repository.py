import threading

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.repository import RoomRepository


class InMemoryRoomRepository(RoomRepository):
    """メモリ上に部屋カタログを保持する RoomRepository の具象実装"""

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self._lock = threading.Lock()
        self._rooms: dict[int, Room] = {}
        for room in rooms or []:
            self.save(room)

    def save(self, room: Room) -> None:
        with self._lock:
            self._rooms[room.id] = room

    def find_by_id(self, room_id: int) -> Room | None:
        with self._lock:
            return self._rooms.get(room_id)

    def find_by_hotel_id(self, hotel_id: int) -> list[Room]:
        with self._lock:
            rooms = [
                room for room in self._rooms.values() if room.belongs_to(hotel_id)
            ]
        return sorted(rooms, key=lambda room: room.room_number)

    def find_available_candidates(
        self, guest_count: int, hotel_id: int | None = None
    ) -> list[Room]:
        with self._lock:
            rooms = list(self._rooms.values())
        return [
            room
            for room in rooms
            if room.can_accommodate(guest_count)
            and (hotel_id is None or room.belongs_to(hotel_id))
        ]
