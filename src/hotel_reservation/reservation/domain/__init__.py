from .entity import Booking, Room
from .factory import BookingDetails, BookingFactory, BookingNumberGenerator
from .repository import BookingRepository, RoomRepository
from .service import BookingValidator
from .value_object import (
    BookingId,
    BookingNumber,
    GuestName,
    Hotel,
    RoomType,
    StayPeriod,
    overlaps,
)

__all__ = [
    "Booking",
    "Room",
    "BookingDetails",
    "BookingFactory",
    "BookingNumberGenerator",
    "BookingRepository",
    "RoomRepository",
    "BookingValidator",
    "BookingId",
    "BookingNumber",
    "GuestName",
    "Hotel",
    "RoomType",
    "StayPeriod",
    "overlaps",
]
