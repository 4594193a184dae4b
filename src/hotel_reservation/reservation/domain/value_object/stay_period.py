from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from hotel_reservation.reservation.domain.exception import InvalidDateOrderException


def overlaps(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    """半開区間 [start, end) 同士が重なるかを判定する

    チェックアウト日と次の予約のチェックイン日が同じ場合は重ならない。
    予約の検証と空室検索はどちらもこの関数で判定する。
    """
    return a_start < b_end and b_start < a_end


@dataclass(frozen=True)
class StayPeriod:
    """滞在期間(チェックイン日 + チェックアウト日)"""

    check_in: date
    check_out: date

    def __post_init__(self) -> None:
        if self.check_out <= self.check_in:
            raise InvalidDateOrderException(self.check_in, self.check_out)

    @classmethod
    def from_iso(cls, check_in: str, check_out: str) -> StayPeriod:
        """YYYY-MM-DD 形式の文字列から生成する"""
        try:
            check_in_date = date.fromisoformat(check_in)
            check_out_date = date.fromisoformat(check_out)
        except ValueError as e:
            raise ValueError(f"Invalid date format: {e}") from e
        return cls(check_in=check_in_date, check_out=check_out_date)

    def nights(self) -> int:
        """宿泊数を計算する"""
        return (self.check_out - self.check_in).days

    def overlaps(self, other: StayPeriod) -> bool:
        return overlaps(self.check_in, self.check_out, other.check_in, other.check_out)
