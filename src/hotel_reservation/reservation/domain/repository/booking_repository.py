from abc import abstractmethod

from hotel_reservation.reservation.domain.entity import Booking
from hotel_reservation.reservation.domain.value_object import (
    BookingId,
    BookingNumber,
    StayPeriod,
)
from hotel_reservation.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース

    実装は同じ部屋で期間の重なる予約・重複した予約番号の書き込みを
    アトミックに拒否し、DuplicateResourceException を送出すること。
    """

    @abstractmethod
    def save(self, booking: Booking) -> BookingId:
        """予約を保存し、保存した予約IDを返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_number(self, booking_number: BookingNumber) -> Booking | None:
        """予約番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_booking_number(self, booking_number: BookingNumber) -> bool:
        """予約番号が使用済みか"""
        raise NotImplementedError

    @abstractmethod
    def has_overlap(
        self,
        room_id: int,
        stay_period: StayPeriod,
        exclude_booking_id: BookingId | None = None,
    ) -> bool:
        """同じ部屋に期間の重なる予約があるか

        判定は StayPeriod.overlaps（半開区間）で行うこと。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_room_id(self, room_id: int) -> list[Booking]:
        """部屋の予約をチェックイン日順で返す"""
        raise NotImplementedError

    @abstractmethod
    def delete_by_booking_number(self, booking_number: BookingNumber) -> bool:
        """予約番号で削除する。削除した場合 True"""
        raise NotImplementedError
