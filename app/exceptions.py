from typing import Any, Mapping, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message, sent to the client as-is
        field: optional name of the offending input field
        details: optional mapping with extra context
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(ServiceError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    When ``field`` and ``reason`` are given the message takes the
    ``Param <field>: <reason>`` form used by the request validation handler.
    """

    http_status = 400
    default_message = "Invalid input"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        reason: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        if message is None and field and reason:
            message = f"Param {field}: {reason}"
        super().__init__(message, field=field, details=details, code=code)
        self.reason = reason


class DuplicateContactError(ServiceValidationError):
    """Raised when registering an owner whose email is already taken."""

    default_message = "User with email already exists"

    def __init__(self, email: Optional[str] = None):
        super().__init__(field="email")
        self.email = email


class NotFoundError(ServiceError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404
    default_message = "Not found"

    @classmethod
    def for_entity(cls, entity: str) -> "NotFoundError":
        return cls(f"{entity} not found")


class UnauthorizedError(ServiceError):
    """Raised when the session token is missing or unknown. http_status is 401."""

    http_status = 401
    default_message = "Unauthorized"
