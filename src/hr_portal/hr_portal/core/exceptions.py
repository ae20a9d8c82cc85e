class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AmbiguousImportTargetError(ValidationError):
    """Raised when a spreadsheet name matches more than one target table."""

    def __init__(self, file_name: str, candidates):
        self.file_name = file_name
        self.candidates = tuple(candidates)
        names = ", ".join(c.value for c in self.candidates)
        super().__init__(f"File name '{file_name}' matches several tables ({names}); choose a target explicitly")


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class DataAccessError(DomainError):
    """Raised when the database rejects a write; the open transaction was rolled back."""
