from .dynamodb import query_all, scan_all
from .http_response import api_response, error_response
from .logger import SERVICE_NAME, get_logger

__all__ = [
    "api_response",
    "error_response",
    "get_logger",
    "query_all",
    "scan_all",
    "SERVICE_NAME",
]
