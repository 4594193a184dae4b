class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    error_code = "DOMAIN_ERROR"


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    error_code = "RESOURCE_NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    error_code = "DUPLICATE_RESOURCE"
