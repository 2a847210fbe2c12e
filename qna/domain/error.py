"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Invalid argument supplied to a domain operation."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class ConflictError(DomainError):
    """A uniqueness race that could not be resolved by retrying."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an operation they are not allowed to perform."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
