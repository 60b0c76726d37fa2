from .exceptions import (
    AuthenticationRequiredException,
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
    ServiceUnavailableException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "ServiceUnavailableException",
    "AuthenticationRequiredException",
]
