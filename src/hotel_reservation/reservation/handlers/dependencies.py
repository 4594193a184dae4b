"""Lambda コンテナごとに一度だけリポジトリとユースケースを組み立てる"""

import os

from hotel_reservation.reservation.applications import (
    CancelBookingService,
    CreateBookingService,
    FindBookingService,
    SearchAvailabilityService,
)
from hotel_reservation.reservation.domain.factory import (
    DEFAULT_MAX_ATTEMPTS,
    BookingFactory,
    BookingNumberGenerator,
)
from hotel_reservation.reservation.domain.service import BookingValidator
from hotel_reservation.reservation.infrastructure import (
    DynamoDBBookingRepository,
    DynamoDBRoomRepository,
)

booking_repository = DynamoDBBookingRepository()
room_repository = DynamoDBRoomRepository()

validator = BookingValidator(booking_repository)
number_generator = BookingNumberGenerator(
    booking_repository,
    max_attempts=int(
        os.getenv("BOOKING_NUMBER_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))
    ),
)

create_booking_service = CreateBookingService(
    booking_repository=booking_repository,
    room_repository=room_repository,
    validator=validator,
    number_generator=number_generator,
    factory=BookingFactory(),
)
find_booking_service = FindBookingService(repository=booking_repository)
cancel_booking_service = CancelBookingService(repository=booking_repository)
search_availability_service = SearchAvailabilityService(
    room_repository=room_repository,
    booking_repository=booking_repository,
    validator=validator,
)
