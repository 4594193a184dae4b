from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from hotel_reservation.reservation.handlers import dependencies
from hotel_reservation.reservation.handlers.errors import internal_error_response
from hotel_reservation.reservation.handlers.response_models import (
    to_booking_response,
)
from hotel_reservation.shared.utils import api_response, error_response, get_logger

logger = get_logger()

service = dependencies.find_booking_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約照会 Lambda Handler (GET /bookings/{booking_number})"""

    path_params = event.path_parameters or {}
    booking_number = path_params.get("booking_number")

    logger.info("Fetching booking", extra={"booking_number": booking_number})

    try:
        booking = service.find_by_booking_number(booking_number)
    except Exception:
        logger.exception("Failed to fetch booking")
        return internal_error_response()

    if booking is None:
        return error_response(
            404,
            "BOOKING_NOT_FOUND",
            f"Booking with number '{booking_number}' not found",
        )
    return api_response(200, to_booking_response(booking))
