from __future__ import annotations

from dataclasses import dataclass
from datetime import date

PREFIX = "BK"


@dataclass(frozen=True)
class BookingNumber:
    """予約番号（利用者に提示する予約照会用の番号）

    形式: BK + 発行日(yyyymmdd) + 4桁の乱数 (例: BK202512251234)
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("Booking number cannot be empty")
        if len(self.value) > 50:
            raise ValueError("Booking number is too long (max 50 characters)")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def compose(cls, issued_on: date, suffix: int) -> BookingNumber:
        """発行日と乱数部から予約番号を組み立てる"""
        if not 0 <= suffix <= 9999:
            raise ValueError(f"Suffix must be a 4-digit number: {suffix}")
        return cls(value=f"{PREFIX}{issued_on:%Y%m%d}{suffix:04d}")
