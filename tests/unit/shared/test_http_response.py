import json
from datetime import date

from hotel_reservation.shared.utils import api_response, error_response


class TestApiResponse:
    def test_json_body(self):
        response = api_response(200, {"status": "success", "day": date(2025, 12, 25)})

        assert response["statusCode"] == 200
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"status": "success", "day": "2025-12-25"}


class TestErrorResponse:
    def test_without_details(self):
        response = error_response(404, "BOOKING_NOT_FOUND", "not found")

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {
            "status": "error",
            "error_code": "BOOKING_NOT_FOUND",
            "message": "not found",
        }

    def test_with_details(self):
        details = [{"loc": ["check_in"], "msg": "Field required"}]

        response = error_response(400, "VALIDATION_ERROR", "Invalid request", details)

        assert json.loads(response["body"])["details"] == details
