import json
from unittest.mock import MagicMock

import pytest

from hotel_reservation.reservation.applications import CancelBookingService
from hotel_reservation.reservation.handlers import delete


@pytest.fixture
def mock_service(monkeypatch):
    service = MagicMock()
    monkeypatch.setattr(delete, "service", service)
    return service


class TestDeleteHandler:
    def test_deleted(self, mock_service, api_event, lambda_context):
        mock_service.cancel.return_value = True
        event = api_event(path_parameters={"booking_number": "BK202512011234"})

        response = delete.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {
            "status": "success",
            "message": "Booking 'BK202512011234' has been deleted",
        }

    def test_not_found(self, mock_service, api_event, lambda_context):
        mock_service.cancel.return_value = False
        event = api_event(path_parameters={"booking_number": "BK202512019999"})

        response = delete.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "BOOKING_NOT_FOUND"

    def test_missing_path_parameter(self, mock_service, api_event, lambda_context):
        mock_service.cancel.return_value = False

        response = delete.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 404
        mock_service.cancel.assert_called_once_with(None)

    def test_too_long_number_is_not_found(
        self, monkeypatch, api_event, lambda_context, booking_repository
    ):
        monkeypatch.setattr(delete, "service", CancelBookingService(booking_repository))
        event = api_event(path_parameters={"booking_number": "X" * 51})

        response = delete.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "BOOKING_NOT_FOUND"
