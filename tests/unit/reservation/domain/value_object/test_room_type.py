import pytest

from hotel_reservation.reservation.domain.value_object.room_type import RoomType


class TestRoomType:
    def test_valid_room_type(self):
        room_type = RoomType(id=1, name="Single", capacity=1)
        assert room_type.capacity == 1

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_below_one_raises_error(self, capacity):
        with pytest.raises(ValueError, match="capacity must be at least 1"):
            RoomType(id=1, name="Broken", capacity=capacity)
