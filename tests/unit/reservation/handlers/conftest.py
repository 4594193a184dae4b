import json
import os
from dataclasses import dataclass

import pytest

# dependencies モジュールは import 時に boto3 リソースを生成する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "reservation-table")


@dataclass
class LambdaContext:
    function_name: str = "reservation-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:reservation-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (payload v2) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query_string_parameters: dict | None = None,
    ) -> dict:
        event: dict = {
            "version": "2.0",
            "routeKey": "$default",
            "rawPath": "/",
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "requestContext": {
                "http": {"method": "GET", "path": "/"},
                "requestId": "request-1",
                "stage": "$default",
            },
            "isBase64Encoded": False,
        }
        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)
        if path_parameters is not None:
            event["pathParameters"] = path_parameters
        if query_string_parameters is not None:
            event["queryStringParameters"] = query_string_parameters
        return event

    return _factory

