import threading

from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    StayPeriod,
)
from hotel_reservation.shared.domain.exception import DuplicateResourceException


class InMemoryBookingRepository(BookingRepository):
    """メモリ上に予約を保持する BookingRepository の具象実装

    重なり判定と書き込みを同一ロック内で行い、二重予約を防ぐ。
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bookings: dict[BookingId, Booking] = {}

    def save(self, booking: Booking) -> BookingId:
        with self._lock:
            if self._find_by_number(booking.booking_number) is not None:
                raise DuplicateResourceException(
                    f"Booking number already exists: {booking.booking_number}"
                )
            if self._overlaps(booking.room_id, booking.stay_period, None):
                raise DuplicateResourceException(
                    f"Room {booking.room_id} already has a booking overlapping "
                    f"{booking.stay_period.check_in} - {booking.stay_period.check_out}"
                )
            self._bookings[booking.id] = booking
        return booking.id

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            return self._bookings.get(booking_id)

    def find_by_booking_number(self, booking_number: BookingNumber) -> Booking | None:
        with self._lock:
            return self._find_by_number(booking_number)

    def exists_by_booking_number(self, booking_number: BookingNumber) -> bool:
        return self.find_by_booking_number(booking_number) is not None

    def has_overlap(
        self,
        room_id: int,
        stay_period: StayPeriod,
        exclude_booking_id: BookingId | None = None,
    ) -> bool:
        with self._lock:
            return self._overlaps(room_id, stay_period, exclude_booking_id)

    def find_by_room_id(self, room_id: int) -> list[Booking]:
        with self._lock:
            bookings = [b for b in self._bookings.values() if b.room_id == room_id]
        return sorted(bookings, key=lambda b: b.stay_period.check_in)

    def delete_by_booking_number(self, booking_number: BookingNumber) -> bool:
        with self._lock:
            booking = self._find_by_number(booking_number)
            if booking is None:
                return False
            del self._bookings[booking.id]
            return True

    def _find_by_number(self, booking_number: BookingNumber) -> Booking | None:
        for booking in self._bookings.values():
            if booking.booking_number == booking_number:
                return booking
        return None

    def _overlaps(
        self,
        room_id: int,
        stay_period: StayPeriod,
        exclude_booking_id: BookingId | None,
    ) -> bool:
        return any(
            booking.conflicts_with(room_id, stay_period)
            for booking in self._bookings.values()
            if booking.id != exclude_booking_id
        )
