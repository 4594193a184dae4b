from __future__ import annotations

from pydantic import BaseModel

from hotel_reservation.reservation.domain.entity import Booking, Room


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    booking_id: str
    booking_number: str
    room_id: int
    check_in: str
    check_out: str
    nights: int
    guest_count: int
    guest_name: str
    created_at: str


class RoomData(BaseModel):
    """部屋データのレスポンスモデル"""

    room_id: int
    hotel_id: int
    hotel_name: str
    hotel_address: str | None = None
    room_number: str
    room_type_name: str
    capacity: int


class BookingResponse(BaseModel):
    status: str = "success"
    data: BookingData


class BookingListResponse(BaseModel):
    status: str = "success"
    data: list[BookingData]
    count: int


class RoomListResponse(BaseModel):
    status: str = "success"
    data: list[RoomData]
    count: int


def to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        booking_id=str(booking.id),
        booking_number=str(booking.booking_number),
        room_id=booking.room_id,
        check_in=booking.stay_period.check_in.isoformat(),
        check_out=booking.stay_period.check_out.isoformat(),
        nights=booking.stay_period.nights(),
        guest_count=booking.guest_count,
        guest_name=str(booking.guest_name),
        created_at=booking.created_at.isoformat(),
    )


def to_room_data(room: Room) -> RoomData:
    return RoomData(
        room_id=room.id,
        hotel_id=room.hotel.id,
        hotel_name=room.hotel.name,
        hotel_address=room.hotel.address,
        room_number=room.room_number,
        room_type_name=room.room_type.name,
        capacity=room.capacity,
    )


def to_booking_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingResponse(data=to_booking_data(booking)).model_dump()


def to_booking_list_response(bookings: list[Booking]) -> dict:
    data = [to_booking_data(booking) for booking in bookings]
    return BookingListResponse(data=data, count=len(data)).model_dump()


def to_room_list_response(rooms: list[Room]) -> dict:
    data = [to_room_data(room) for room in rooms]
    return RoomListResponse(data=data, count=len(data)).model_dump()
