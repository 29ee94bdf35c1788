"""Application exception types."""

from bookstore.schemas.error import ErrorResponse


class ApiError(Exception):
    """Structured API error that maps directly to the error envelope."""

    default_code = "API_ERROR"

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        self.status_code = status_code
        self.code = code or self.default_code
        self.payload = ErrorResponse(message=message)
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.payload.message


class FieldValidationError(ApiError):
    """Request payload rejected by a validation schema."""

    default_code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str, status_code: int = 400) -> None:
        self.field = field
        super().__init__(status_code=status_code, message=message)


class MissingRequiredFieldError(FieldValidationError):
    default_code = "MISSING_REQUIRED_FIELD"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"{field} is required")


class TypeValidationError(FieldValidationError):
    default_code = "TYPE_VALIDATION_FAILED"


class CustomValidationError(FieldValidationError):
    default_code = "CUSTOM_VALIDATION_FAILED"


class UnsupportedTypeError(FieldValidationError):
    """Schema references a type tag the dispatch tables do not know."""

    default_code = "UNSUPPORTED_TYPE"

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Unsupported validation type for {field}")


class CredentialMissingError(ApiError):
    default_code = "CREDENTIAL_MISSING"

    def __init__(self) -> None:
        super().__init__(status_code=401, message="Access denied. No token provided")


class CredentialInvalidError(ApiError):
    default_code = "CREDENTIAL_INVALID"

    def __init__(self) -> None:
        super().__init__(status_code=401, message="Invalid token")


class AuthorizationDeniedError(ApiError):
    default_code = "FORBIDDEN"

    def __init__(self, message: str = "You do not have permission to access this route") -> None:
        super().__init__(status_code=403, message=message)


class SchemaDefinitionError(ValueError):
    """Raised at import time when a validation schema violates its invariants."""


__all__ = [
    "ApiError",
    "AuthorizationDeniedError",
    "CredentialInvalidError",
    "CredentialMissingError",
    "CustomValidationError",
    "FieldValidationError",
    "MissingRequiredFieldError",
    "SchemaDefinitionError",
    "TypeValidationError",
    "UnsupportedTypeError",
]
