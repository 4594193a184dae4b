from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """現在日時（UTC, タイムゾーン付き）"""
    return datetime.now(timezone.utc)
