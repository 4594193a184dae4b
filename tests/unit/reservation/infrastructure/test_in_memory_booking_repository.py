from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    StayPeriod,
)
from hotel_reservation.reservation.infrastructure import InMemoryBookingRepository
from hotel_reservation.shared.domain.exception import DuplicateResourceException


class TestInMemoryBookingRepository:
    def test_save_and_find(self, booking_repository, create_booking):
        booking = create_booking()

        assert booking_repository.save(booking) == booking.id
        assert booking_repository.find_by_id(booking.id) == booking
        assert booking_repository.find_by_booking_number(booking.booking_number) == booking
        assert booking_repository.exists_by_booking_number(booking.booking_number)

    def test_duplicate_booking_number_is_rejected(
        self, booking_repository, create_booking
    ):
        booking_repository.save(create_booking(booking_id="b-1", room_id=1))

        with pytest.raises(DuplicateResourceException):
            booking_repository.save(create_booking(booking_id="b-2", room_id=2))

    def test_overlapping_booking_is_rejected(self, booking_repository, create_booking):
        booking_repository.save(create_booking())

        with pytest.raises(DuplicateResourceException):
            booking_repository.save(
                create_booking(
                    booking_id="b-2",
                    booking_number="BK202512015678",
                    check_in=date(2025, 12, 27),
                    check_out=date(2025, 12, 30),
                )
            )

    def test_has_overlap(self, booking_repository, create_booking):
        booking = create_booking()
        booking_repository.save(booking)

        assert booking_repository.has_overlap(
            1, StayPeriod(date(2025, 12, 27), date(2025, 12, 29))
        )
        assert not booking_repository.has_overlap(
            1, StayPeriod(date(2025, 12, 28), date(2025, 12, 29))
        )
        assert not booking_repository.has_overlap(
            2, StayPeriod(date(2025, 12, 25), date(2025, 12, 28))
        )

    def test_has_overlap_excludes_booking(self, booking_repository, create_booking):
        booking = create_booking()
        booking_repository.save(booking)

        assert not booking_repository.has_overlap(1, booking.stay_period, booking.id)

    def test_delete(self, booking_repository, create_booking):
        booking = create_booking()
        booking_repository.save(booking)

        assert booking_repository.delete_by_booking_number(booking.booking_number)
        assert booking_repository.find_by_id(booking.id) is None
        assert not booking_repository.delete_by_booking_number(booking.booking_number)

    def test_missing_booking(self, booking_repository):
        assert booking_repository.find_by_id(BookingId(value="missing")) is None
        assert not booking_repository.exists_by_booking_number(
            BookingNumber(value="BK202512010000")
        )

    def test_concurrent_overlapping_saves_allow_one(self, create_booking):
        repository = InMemoryBookingRepository()
        bookings = [
            create_booking(booking_id=f"b-{i}", booking_number=f"BK2025120110{i:02d}")
            for i in range(20)
        ]

        def _save(booking):
            try:
                repository.save(booking)
                return True
            except DuplicateResourceException:
                return False

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(_save, bookings))

        assert results.count(True) == 1
        assert len(repository.find_by_room_id(1)) == 1
