from .booking_validator import BookingValidator

__all__ = ["BookingValidator"]
