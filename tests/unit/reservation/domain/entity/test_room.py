import pytest

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.value_object import Hotel, RoomType


class TestRoom:
    def test_room_properties(self, create_room):
        room = create_room(room_id=7, hotel_name="Grand Hotel", room_number="204")
        assert room.id == 7
        assert room.hotel.name == "Grand Hotel"
        assert room.room_number == "204"
        assert room.capacity == 2

    def test_can_accommodate_up_to_capacity(self, create_room):
        room = create_room(capacity=2)
        assert room.can_accommodate(1)
        assert room.can_accommodate(2)
        assert not room.can_accommodate(3)

    def test_belongs_to(self, create_room):
        room = create_room(hotel_id=3)
        assert room.belongs_to(3)
        assert not room.belongs_to(4)

    def test_empty_room_number_raises_error(self):
        with pytest.raises(ValueError, match="Room number cannot be empty"):
            Room(
                id=1,
                hotel=Hotel(id=1, name="Grand Hotel"),
                room_type=RoomType(id=1, name="Single", capacity=1),
                room_number=" ",
            )

    def test_equality_by_id(self, create_room):
        assert create_room(room_id=1, room_number="101") == create_room(
            room_id=1, room_number="999"
        )
        assert create_room(room_id=1) != create_room(room_id=2)
