from datetime import date

from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
)


class InvalidDateOrderException(BusinessRuleViolationException):
    """チェックイン日がチェックアウト日より前でない場合"""

    error_code = "INVALID_DATE_ORDER"

    def __init__(self, check_in: date, check_out: date) -> None:
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Check-in date must be before check-out date "
            f"(check_in={check_in}, check_out={check_out})"
        )


class CheckInInPastException(BusinessRuleViolationException):
    """チェックイン日が本日以前の場合"""

    error_code = "CHECK_IN_IN_PAST"

    def __init__(self, check_in: date, today: date) -> None:
        self.check_in = check_in
        self.today = today
        super().__init__(
            f"Check-in date cannot be in the past (check_in={check_in}, today={today})"
        )


class RoomNotFoundException(ResourceNotFoundException):
    """部屋が存在しない場合"""

    error_code = "ROOM_NOT_FOUND"

    def __init__(self, room_id: int) -> None:
        self.room_id = room_id
        super().__init__(f"Room with ID {room_id} not found")


class CapacityExceededException(BusinessRuleViolationException):
    """宿泊人数が部屋の定員を超える場合"""

    error_code = "CAPACITY_EXCEEDED"

    def __init__(self, requested: int, capacity: int) -> None:
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Guest count ({requested}) exceeds room capacity ({capacity})"
        )


class InvalidGuestCountException(BusinessRuleViolationException):
    """宿泊人数が1未満の場合"""

    error_code = "INVALID_GUEST_COUNT"

    def __init__(self, guest_count: int) -> None:
        self.guest_count = guest_count
        super().__init__(f"Guest count must be at least 1 (got {guest_count})")


class OverlapConflictException(BusinessRuleViolationException):
    """同じ部屋に期間の重なる予約が既に存在する場合"""

    error_code = "OVERLAP_CONFLICT"

    def __init__(self, room_id: int, check_in: date, check_out: date) -> None:
        self.room_id = room_id
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Room {room_id} is already booked during the selected dates "
            f"({check_in} - {check_out})"
        )


class BookingNumberGenerationExhaustedException(DomainException):
    """リトライ上限内に一意な予約番号を生成できなかった場合"""

    error_code = "BOOKING_NUMBER_GENERATION_EXHAUSTED"

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Unable to generate unique booking number after {attempts} attempts"
        )


class PersistenceInconsistencyException(DomainException):
    """保存に成功したはずの予約が再取得できない場合"""

    error_code = "PERSISTENCE_INCONSISTENCY"

    def __init__(self, booking_number: str) -> None:
        self.booking_number = booking_number
        super().__init__(
            f"Failed to retrieve the created booking: {booking_number}"
        )
