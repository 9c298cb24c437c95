"""
Domain exceptions.
"""


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainException):
    """Raised when an entity is not found."""

    def __init__(self, entity_name: str, entity_id: str, message: str = None):
        super().__init__(
            message=message or f"{entity_name} with id '{entity_id}' not found",
            code="ENTITY_NOT_FOUND"
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class ValidationError(DomainException):
    """Raised when validation fails."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolationError(DomainException):
    """Raised when a business rule is violated."""

    def __init__(self, message: str, rule: str = None):
        super().__init__(message=message, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class InvalidOperationError(DomainException):
    """Raised when an operation is invalid for the current state."""

    def __init__(self, message: str, operation: str = None, state: str = None):
        super().__init__(message=message, code="INVALID_OPERATION")
        self.operation = operation
        self.state = state


class OperationFailedError(DomainException):
    """
    Raised when a multi-step operation fails at any step.

    Wraps the original error so callers see which operation failed
    while the cause keeps its own type and message.
    """

    def __init__(self, operation: str, entity_name: str, cause: Exception):
        super().__init__(
            message=f"Failed to {operation} {entity_name}: {error_message(cause)}",
            code=getattr(cause, 'code', None) or "OPERATION_FAILED",
        )
        self.operation = operation
        self.entity_name = entity_name
        self.cause = cause


def error_message(exc: Exception) -> str:
    """Get the human readable message of an exception."""
    return getattr(exc, 'message', None) or str(exc)
