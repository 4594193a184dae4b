from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from hotel_reservation.reservation.handlers import dependencies
from hotel_reservation.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    validation_error_response,
)
from hotel_reservation.reservation.handlers.request_models import (
    SearchAvailabilityRequest,
)
from hotel_reservation.reservation.handlers.response_models import (
    to_room_list_response,
)
from hotel_reservation.shared.domain.exception import DomainException
from hotel_reservation.shared.utils import api_response, get_logger

logger = get_logger()

service = dependencies.search_availability_service


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空室検索 Lambda Handler (GET /rooms/availability)"""
    logger.info("Received search availability request")

    try:
        request = SearchAvailabilityRequest.model_validate(
            event.query_string_parameters or {}
        )
    except ValidationError as e:
        return validation_error_response(e)

    try:
        rooms = service.search(
            check_in=request.check_in,
            check_out=request.check_out,
            guest_count=request.guest_count,
            hotel_id=request.hotel_id,
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception("Failed to search availability")
        return internal_error_response()

    return api_response(200, to_room_list_response(rooms))
