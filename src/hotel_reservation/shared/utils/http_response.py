import json


def api_response(status_code: int, body: dict | list) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: list | None = None,
) -> dict:
    """エラーレスポンスを生成"""
    body: dict = {"status": "error", "error_code": error_code, "message": message}
    if details:
        body["details"] = details
    return api_response(status_code, body)
