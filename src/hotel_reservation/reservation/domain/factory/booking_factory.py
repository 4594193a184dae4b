from datetime import date
from typing import TypedDict

from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain import Clock, utc_now


class BookingDetails(TypedDict):
    """予約リクエストの入力データ"""

    room_id: int
    check_in: date
    check_out: date
    guest_count: int
    guest_name: str


class BookingFactory:
    """予約エンティティを生成するFactory"""

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def create(
        self, booking_number: BookingNumber, booking_details: BookingDetails
    ) -> Booking:
        """検証済みの入力から新規予約のエンティティを作成する"""

        stay_period = StayPeriod(
            check_in=booking_details["check_in"],
            check_out=booking_details["check_out"],
        )
        guest_name = GuestName(booking_details["guest_name"])

        return Booking(
            id=BookingId.generate(),
            booking_number=booking_number,
            room_id=booking_details["room_id"],
            stay_period=stay_period,
            guest_count=booking_details["guest_count"],
            guest_name=guest_name,
            created_at=self._clock(),
        )
