from abc import abstractmethod

from hotel_reservation.reservation.domain.entity import Room
from hotel_reservation.shared.domain import Repository


class RoomRepository(Repository[Room, int]):
    """部屋レポジトリのインターフェース"""

    @abstractmethod
    def save(self, room: Room) -> None:
        """部屋を保存する（カタログ投入用）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, room_id: int) -> Room | None:
        """部屋IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_available_candidates(
        self, guest_count: int, hotel_id: int | None = None
    ) -> list[Room]:
        """定員・ホテルで絞り込んだ空室候補を返す（予約の重なりは考慮しない）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_hotel_id(self, hotel_id: int) -> list[Room]:
        """ホテルの部屋を部屋番号順で返す"""
        raise NotImplementedError
