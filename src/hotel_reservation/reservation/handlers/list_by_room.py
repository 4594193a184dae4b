from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.reservation.handlers import dependencies
from hotel_reservation.reservation.handlers.errors import internal_error_response
from hotel_reservation.reservation.handlers.response_models import (
    to_booking_list_response,
)
from hotel_reservation.shared.utils import api_response, error_response, get_logger

logger = get_logger()

service = dependencies.find_booking_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """部屋別予約一覧 Lambda Handler (GET /rooms/{room_id}/bookings)"""

    path_params = event.path_parameters or {}
    try:
        room_id = int(path_params.get("room_id", ""))
    except ValueError:
        return error_response(400, "VALIDATION_ERROR", "room_id must be an integer")

    logger.info("Listing bookings for room", extra={"room_id": room_id})

    try:
        bookings = service.find_by_room_id(room_id)
    except Exception:
        logger.exception("Failed to list bookings for room")
        return internal_error_response()

    return api_response(200, to_booking_list_response(bookings))
