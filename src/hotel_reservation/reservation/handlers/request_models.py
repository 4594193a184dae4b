from datetime import date

from pydantic import BaseModel, Field, field_validator


class CreateBookingRequest(BaseModel):
    """予約作成リクエストモデル

    日付の前後関係・人数の上下限はドメイン層で検証する。
    """

    room_id: int = Field(..., description="部屋ID")
    check_in: date = Field(
        ...,
        description="チェックイン日（YYYY-MM-DD形式）",
        examples=["2025-12-25"],
    )
    check_out: date = Field(
        ...,
        description="チェックアウト日（YYYY-MM-DD形式）",
        examples=["2025-12-28"],
    )
    guest_count: int = Field(..., description="宿泊人数")
    guest_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="宿泊者名",
    )

    @field_validator("guest_name")
    @classmethod
    def reject_blank_guest_name(cls, v: str) -> str:
        """空白のみの宿泊者名を拒否する"""
        if not v.strip():
            raise ValueError("Guest name cannot be empty")
        return v


class SearchAvailabilityRequest(BaseModel):
    """空室検索リクエストモデル（クエリ文字列）"""

    check_in: date
    check_out: date
    guest_count: int
    hotel_id: int | None = None
