from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.reservation.domain.factory import BookingDetails
from hotel_reservation.reservation.handlers import dependencies
from hotel_reservation.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    status_code_for,
    validation_error_response,
)
from hotel_reservation.reservation.handlers.request_models import CreateBookingRequest
from hotel_reservation.reservation.handlers.response_models import (
    to_booking_response,
)
from hotel_reservation.shared.domain.exception import DomainException
from hotel_reservation.shared.utils import api_response, get_logger

logger = get_logger()

service = dependencies.create_booking_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約作成 Lambda Handler (POST /bookings)"""
    logger.info("Received create booking request")

    try:
        request = CreateBookingRequest.model_validate_json(
            event.decoded_body if event.body else "{}"
        )
    except ValidationError as e:
        return validation_error_response(e)

    booking_details: BookingDetails = {
        "room_id": request.room_id,
        "check_in": request.check_in,
        "check_out": request.check_out,
        "guest_count": request.guest_count,
        "guest_name": request.guest_name,
    }

    try:
        booking = service.create(booking_details)
    except DomainException as e:
        if status_code_for(e) == 500:
            logger.exception("Failed to create booking")
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to create booking")
        return internal_error_response()

    return api_response(201, to_booking_response(booking))
