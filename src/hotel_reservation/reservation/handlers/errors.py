from pydantic import ValidationError

from hotel_reservation.reservation.domain.exception import OverlapConflictException
from hotel_reservation.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)
from hotel_reservation.shared.utils import error_response

# 先頭から順に判定する（サブクラスを先に置く）
_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int]] = [
    (OverlapConflictException, 409),
    (DuplicateResourceException, 409),
    (ResourceNotFoundException, 404),
    (BusinessRuleViolationException, 400),
]


def status_code_for(error: DomainException) -> int:
    """ドメイン例外に対応する HTTP ステータスコード。該当なしはサーバ側の失敗"""
    for exception_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return status_code
    return 500


def domain_error_response(error: DomainException) -> dict:
    status_code = status_code_for(error)
    if status_code == 500:
        return error_response(500, error.error_code, "Internal server error")
    return error_response(status_code, error.error_code, str(error))


def validation_error_response(error: ValidationError) -> dict:
    return error_response(
        400,
        "VALIDATION_ERROR",
        "Invalid request",
        details=error.errors(include_url=False, include_context=False),
    )


def internal_error_response() -> dict:
    return error_response(500, "INTERNAL_ERROR", "Internal server error")
