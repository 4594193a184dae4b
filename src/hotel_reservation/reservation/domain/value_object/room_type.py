from dataclasses import dataclass


@dataclass(frozen=True)
class RoomType:
    """部屋タイプ（定員を持つ）"""

    id: int
    name: str
    capacity: int

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError("Room type capacity must be at least 1")
