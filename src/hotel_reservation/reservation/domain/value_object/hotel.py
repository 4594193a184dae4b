from dataclasses import dataclass


@dataclass(frozen=True)
class Hotel:
    """部屋が属するホテル（カタログからのスナップショット）"""

    id: int
    name: str
    address: str | None = None

    def __str__(self) -> str:
        return self.name
