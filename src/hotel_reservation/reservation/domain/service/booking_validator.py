from datetime import date

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.reservation.domain.exception import (
    CapacityExceededException,
    CheckInInPastException,
    InvalidDateOrderException,
    InvalidGuestCountException,
    OverlapConflictException,
    RoomNotFoundException,
)
from hotel_reservation.reservation.domain.factory import BookingDetails
from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import BookingId, StayPeriod
from hotel_reservation.shared.domain import Clock, utc_now


class BookingValidator:
    """予約のビジネスルールを検証するドメインサービス

    検証は以下の順で行い、最初に違反したルールの例外を送出する。

    1. チェックイン日 < チェックアウト日
    2. チェックイン日 > 本日
    3. 部屋が存在する
    4. 宿泊人数 <= 定員
    5. 宿泊人数 >= 1
    6. 同じ部屋に期間の重なる予約がない
    """

    def __init__(self, repository: BookingRepository, clock: Clock = utc_now) -> None:
        self._repository = repository
        self._clock = clock

    def validate(
        self,
        booking_details: BookingDetails,
        room: Room | None,
        exclude_booking_id: BookingId | None = None,
    ) -> None:
        check_in = booking_details["check_in"]
        check_out = booking_details["check_out"]
        guest_count = booking_details["guest_count"]

        self.validate_stay_window(check_in, check_out)

        if room is None:
            raise RoomNotFoundException(booking_details["room_id"])

        if not room.can_accommodate(guest_count):
            raise CapacityExceededException(guest_count, room.capacity)

        self.validate_guest_count(guest_count)

        stay_period = StayPeriod(check_in=check_in, check_out=check_out)
        if self._repository.has_overlap(room.id, stay_period, exclude_booking_id):
            raise OverlapConflictException(room.id, check_in, check_out)

    def validate_stay_window(self, check_in: date, check_out: date) -> None:
        """日付の前後関係と、チェックイン日が未来であることを検証する"""
        if check_in >= check_out:
            raise InvalidDateOrderException(check_in, check_out)

        today = self._clock().date()
        if check_in <= today:
            raise CheckInInPastException(check_in, today)

    def validate_guest_count(self, guest_count: int) -> None:
        if guest_count < 1:
            raise InvalidGuestCountException(guest_count)
