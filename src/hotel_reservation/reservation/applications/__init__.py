from .cancel_booking import CancelBookingService
from .create_booking import CreateBookingService
from .find_booking import FindBookingService
from .search_availability import SearchAvailabilityService

__all__ = [
    "CancelBookingService",
    "CreateBookingService",
    "FindBookingService",
    "SearchAvailabilityService",
]
