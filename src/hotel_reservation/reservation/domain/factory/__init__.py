from .booking_factory import BookingDetails, BookingFactory
from .booking_number_generator import DEFAULT_MAX_ATTEMPTS, BookingNumberGenerator

__all__ = [
    "BookingDetails",
    "BookingFactory",
    "BookingNumberGenerator",
    "DEFAULT_MAX_ATTEMPTS",
]
