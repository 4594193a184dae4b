from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import BookingNumber


class FindBookingService:
    """予約照会のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def find_by_booking_number(self, booking_number: str | None) -> Booking | None:
        """予約番号で予約を照会する。空または不正な番号は該当なしとして扱う"""
        if not booking_number or not booking_number.strip():
            return None
        try:
            number = BookingNumber(booking_number)
        except ValueError:
            # 予約番号として成り立たない文字列は該当なし
            return None
        return self._repository.find_by_booking_number(number)

    def find_by_room_id(self, room_id: int) -> list[Booking]:
        """部屋の予約一覧（チェックイン日順）"""
        return self._repository.find_by_room_id(room_id)
