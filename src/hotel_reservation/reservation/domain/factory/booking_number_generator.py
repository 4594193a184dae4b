import random

from hotel_reservation.reservation.domain.exception import (
    BookingNumberGenerationExhaustedException,
)
from hotel_reservation.reservation.domain.repository import BookingRepository
from hotel_reservation.reservation.domain.value_object import BookingNumber
from hotel_reservation.shared.domain import Clock, utc_now

DEFAULT_MAX_ATTEMPTS = 10
SUFFIX_MIN = 1000
SUFFIX_MAX = 9999


class BookingNumberGenerator:
    """一意な予約番号を発行する

    乱数部が既存の予約番号と衝突した場合は引き直し、max_attempts 回連続で
    衝突したら BookingNumberGenerationExhaustedException を送出する。
    """

    def __init__(
        self,
        repository: BookingRepository,
        clock: Clock = utc_now,
        random_source: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._repository = repository
        self._clock = clock
        self._random = random_source or random.Random()
        self._max_attempts = max_attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def generate(self) -> BookingNumber:
        """未使用の予約番号を返す"""
        issued_on = self._clock().date()
        for _ in range(self._max_attempts):
            candidate = BookingNumber.compose(
                issued_on, self._random.randint(SUFFIX_MIN, SUFFIX_MAX)
            )
            if not self._repository.exists_by_booking_number(candidate):
                return candidate
        raise BookingNumberGenerationExhaustedException(self._max_attempts)
