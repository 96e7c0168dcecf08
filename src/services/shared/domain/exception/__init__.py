from .exceptions import (
    ApplicationError,
    DomainException,
    DuplicateResourceException,
    FieldError,
    FieldValidationException,
)

__all__ = [
    "ApplicationError",
    "DomainException",
    "DuplicateResourceException",
    "FieldError",
    "FieldValidationException",
]
