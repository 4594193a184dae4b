from .booking_id import BookingId
from .booking_number import BookingNumber
from .guest_name import GuestName
from .hotel import Hotel
from .room_type import RoomType
from .stay_period import StayPeriod, overlaps

__all__ = [
    "BookingId",
    "BookingNumber",
    "GuestName",
    "Hotel",
    "RoomType",
    "StayPeriod",
    "overlaps",
]
