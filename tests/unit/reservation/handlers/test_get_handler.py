import json
from unittest.mock import MagicMock

import pytest

from hotel_reservation.reservation.applications import FindBookingService
from hotel_reservation.reservation.handlers import get


@pytest.fixture
def mock_service(monkeypatch):
    service = MagicMock()
    monkeypatch.setattr(get, "service", service)
    return service


class TestGetHandler:
    def test_found(self, mock_service, api_event, lambda_context, create_booking):
        mock_service.find_by_booking_number.return_value = create_booking()
        event = api_event(path_parameters={"booking_number": "BK202512011234"})

        response = get.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["booking_number"] == "BK202512011234"
        assert data["guest_name"] == "Jane Doe"
        mock_service.find_by_booking_number.assert_called_once_with("BK202512011234")

    def test_not_found(self, mock_service, api_event, lambda_context):
        mock_service.find_by_booking_number.return_value = None
        event = api_event(path_parameters={"booking_number": "BK202512019999"})

        response = get.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "BOOKING_NOT_FOUND"

    def test_storage_error(self, mock_service, api_event, lambda_context):
        mock_service.find_by_booking_number.side_effect = RuntimeError("boom")
        event = api_event(path_parameters={"booking_number": "BK202512011234"})

        response = get.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 500

    def test_too_long_number_is_not_found(
        self, monkeypatch, api_event, lambda_context, booking_repository
    ):
        monkeypatch.setattr(get, "service", FindBookingService(booking_repository))
        event = api_event(path_parameters={"booking_number": "X" * 51})

        response = get.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["error_code"] == "BOOKING_NOT_FOUND"
