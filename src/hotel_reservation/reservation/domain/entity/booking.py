from datetime import datetime

from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    GuestName,
    StayPeriod,
)
from hotel_reservation.shared.domain import Entity


class Booking(Entity[BookingId]):
    """予約エンティティ

    生成は予約ライフサイクル経由のみ。変更操作は持たず、取消は物理削除で行う。
    """

    def __init__(
        self,
        id: BookingId,
        booking_number: BookingNumber,
        room_id: int,
        stay_period: StayPeriod,
        guest_count: int,
        guest_name: GuestName,
        created_at: datetime,
    ) -> None:
        super().__init__(id)
        self._booking_number = booking_number
        self._room_id = room_id
        self._stay_period = stay_period
        self._guest_count = guest_count
        self._guest_name = guest_name
        self._created_at = created_at

    @property
    def booking_number(self) -> BookingNumber:
        return self._booking_number

    @property
    def room_id(self) -> int:
        return self._room_id

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def guest_name(self) -> GuestName:
        return self._guest_name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def conflicts_with(self, room_id: int, stay_period: StayPeriod) -> bool:
        """同じ部屋で期間が重なるか"""
        return self._room_id == room_id and self._stay_period.overlaps(stay_period)

    def __repr__(self) -> str:
        return (
            f"Booking(booking_number={str(self._booking_number)!r}, "
            f"room_id={self._room_id!r}, "
            f"check_in={self._stay_period.check_in}, "
            f"check_out={self._stay_period.check_out})"
        )
