from datetime import date, datetime, timezone

import pytest

from hotel_reservation.reservation.domain.entity import Booking, Room
from hotel_reservation.reservation.domain.factory import BookingDetails
from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    GuestName,
    Hotel,
    RoomType,
    StayPeriod,
)
from hotel_reservation.reservation.infrastructure import (
    InMemoryBookingRepository,
    InMemoryRoomRepository,
)

FIXED_NOW = datetime(2025, 12, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """テスト共通の現在日時（2025-12-01）"""
    return FIXED_NOW


@pytest.fixture
def clock(now):
    """現在日時を固定した clock"""
    return lambda: now


@pytest.fixture
def create_room():
    """Room を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        room_id: int = 1,
        hotel_id: int = 1,
        hotel_name: str = "Grand Hotel",
        room_number: str = "101",
        capacity: int = 2,
        room_type_name: str = "Double",
        hotel_address: str | None = "1 Main Street",
    ) -> Room:
        return Room(
            id=room_id,
            hotel=Hotel(id=hotel_id, name=hotel_name, address=hotel_address),
            room_type=RoomType(id=capacity, name=room_type_name, capacity=capacity),
            room_number=room_number,
        )

    return _factory


@pytest.fixture
def create_booking(now):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-1",
        booking_number: str = "BK202512011234",
        room_id: int = 1,
        check_in: date = date(2025, 12, 25),
        check_out: date = date(2025, 12, 28),
        guest_count: int = 2,
        guest_name: str = "Jane Doe",
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            booking_number=BookingNumber(value=booking_number),
            room_id=room_id,
            stay_period=StayPeriod(check_in=check_in, check_out=check_out),
            guest_count=guest_count,
            guest_name=GuestName(value=guest_name),
            created_at=now,
        )

    return _factory


@pytest.fixture
def booking_details():
    """BookingDetails を生成する Factory fixture"""

    def _factory(
        room_id: int = 1,
        check_in: date = date(2025, 12, 25),
        check_out: date = date(2025, 12, 28),
        guest_count: int = 2,
        guest_name: str = "Jane Doe",
    ) -> BookingDetails:
        return {
            "room_id": room_id,
            "check_in": check_in,
            "check_out": check_out,
            "guest_count": guest_count,
            "guest_name": guest_name,
        }

    return _factory


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def room_repository():
    return InMemoryRoomRepository()
