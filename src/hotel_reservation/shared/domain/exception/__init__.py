from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
]
