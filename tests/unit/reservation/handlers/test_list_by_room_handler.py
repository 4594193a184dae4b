import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from hotel_reservation.reservation.handlers import list_by_room


@pytest.fixture
def mock_service(monkeypatch):
    service = MagicMock()
    monkeypatch.setattr(list_by_room, "service", service)
    return service


class TestListByRoomHandler:
    def test_lists_bookings(self, mock_service, api_event, lambda_context, create_booking):
        mock_service.find_by_room_id.return_value = [
            create_booking(),
            create_booking(
                booking_id="booking-2",
                booking_number="BK202512015678",
                check_in=date(2026, 1, 5),
                check_out=date(2026, 1, 6),
            ),
        ]

        response = list_by_room.lambda_handler(
            api_event(path_parameters={"room_id": "1"}), lambda_context
        )

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["count"] == 2
        assert [b["booking_number"] for b in body["data"]] == [
            "BK202512011234",
            "BK202512015678",
        ]
        mock_service.find_by_room_id.assert_called_once_with(1)

    def test_empty_list(self, mock_service, api_event, lambda_context):
        mock_service.find_by_room_id.return_value = []

        response = list_by_room.lambda_handler(
            api_event(path_parameters={"room_id": "9"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"status": "success", "data": [], "count": 0}

    @pytest.mark.parametrize("path_parameters", [None, {"room_id": "abc"}])
    def test_invalid_room_id(
        self, mock_service, api_event, lambda_context, path_parameters
    ):
        response = list_by_room.lambda_handler(
            api_event(path_parameters=path_parameters), lambda_context
        )

        assert response["statusCode"] == 400
        mock_service.find_by_room_id.assert_not_called()
