from datetime import date

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.repository import (
    BookingRepository,
    RoomRepository,
)
from hotel_reservation.reservation.domain.service import BookingValidator
from hotel_reservation.reservation.domain.value_object import StayPeriod


class SearchAvailabilityService:
    """空室検索のユースケース"""

    def __init__(
        self,
        room_repository: RoomRepository,
        booking_repository: BookingRepository,
        validator: BookingValidator,
    ) -> None:
        self._room_repository = room_repository
        self._booking_repository = booking_repository
        self._validator = validator

    def search(
        self,
        check_in: date,
        check_out: date,
        guest_count: int,
        hotel_id: int | None = None,
    ) -> list[Room]:
        """指定期間・人数で予約可能な部屋をホテル名、部屋番号の順で返す"""

        # 部屋カタログに触れる前にリクエストの形を検証する
        self._validator.validate_stay_window(check_in, check_out)
        self._validator.validate_guest_count(guest_count)

        stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        candidates = self._room_repository.find_available_candidates(
            guest_count, hotel_id
        )

        available = [
            room
            for room in candidates
            if room.can_accommodate(guest_count)
            and (hotel_id is None or room.belongs_to(hotel_id))
            and not self._booking_repository.has_overlap(room.id, stay_period)
        ]
        return sorted(available, key=lambda room: (room.hotel.name, room.room_number))
