from .exceptions import (
    BookingNumberGenerationExhaustedException,
    CapacityExceededException,
    CheckInInPastException,
    InvalidDateOrderException,
    InvalidGuestCountException,
    OverlapConflictException,
    PersistenceInconsistencyException,
    RoomNotFoundException,
)

__all__ = [
    "InvalidDateOrderException",
    "CheckInInPastException",
    "RoomNotFoundException",
    "CapacityExceededException",
    "InvalidGuestCountException",
    "OverlapConflictException",
    "BookingNumberGenerationExhaustedException",
    "PersistenceInconsistencyException",
]
