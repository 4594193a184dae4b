from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import BookingNumber
from hotel_reservation.shared.utils import get_logger

logger = get_logger()


class CancelBookingService:
    """予約取消のユースケース（予約は物理削除する）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, booking_number: str | None) -> bool:
        """予約を取り消す

        Returns:
            bool: 削除した場合 True。該当なし・空または不正な番号は False
        """
        if not booking_number or not booking_number.strip():
            return False
        try:
            number = BookingNumber(booking_number)
        except ValueError:
            return False

        deleted = self._repository.delete_by_booking_number(number)
        if deleted:
            logger.info("Booking cancelled", extra={"booking_number": booking_number})
        return deleted
