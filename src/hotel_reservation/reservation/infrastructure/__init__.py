from .dynamodb_booking_repository import DynamoDBBookingRepository
from .dynamodb_room_repository import DynamoDBRoomRepository
from .in_memory_booking_repository import InMemoryBookingRepository
from .in_memory_room_repository import InMemoryRoomRepository

__all__ = [
    "DynamoDBBookingRepository",
    "DynamoDBRoomRepository",
    "InMemoryBookingRepository",
    "InMemoryRoomRepository",
]
