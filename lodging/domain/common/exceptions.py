"""
Domain layer exceptions.

These exceptions represent domain-level errors that occur when
business rules are violated or domain invariants are broken.
They carry structured details so the calling layer can render a
precise message and choose a transport status from `code`.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message

    def to_dict(self) -> dict[str, object]:
        """Serializable representation for logging and error responses."""
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


class InvalidInputError(DomainError):
    """
    Raised when a constructor or update receives malformed data.

    Example: image count out of bounds, latitude out of range, bad currency.
    """

    code = "INVALID_INPUT"

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidStateError(DomainError):
    """
    Raised when an operation is attempted from a state that forbids it.

    Example: approving an accommodation that is not pending.
    """

    code = "INVALID_STATE"

    def __init__(
        self,
        message: str,
        current_state: str | None = None,
        required_state: str | None = None,
        operation: str | None = None,
    ) -> None:
        details: dict[str, object] = {}
        if current_state is not None:
            details["current_state"] = current_state
        if required_state is not None:
            details["required_state"] = required_state
        if operation is not None:
            details["operation"] = operation
        super().__init__(message, details)
        self.current_state = current_state
        self.required_state = required_state
        self.operation = operation


class InvalidOperationError(DomainError):
    """
    Raised when a business rule other than a raw state guard is violated.

    Example: creating a hotel room when the room type inventory is exhausted.
    """

    code = "INVALID_OPERATION"

    def __init__(
        self, message: str, operation: str | None = None, reason: str | None = None
    ) -> None:
        details: dict[str, object] = {}
        if operation:
            details["operation"] = operation
        if reason:
            details["reason"] = reason
        super().__init__(message, details)
        self.operation = operation
        self.reason = reason


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: looking up a room type by ID that doesn't exist.
    """

    code = "NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class AuthorizationError(DomainError):
    """
    Raised when an operation is not authorized.

    Example: a user who is neither owner nor super admin updating an accommodation.
    """

    code = "FORBIDDEN"

    def __init__(self, message: str = "Not authorized to perform this action") -> None:
        super().__init__(message)
