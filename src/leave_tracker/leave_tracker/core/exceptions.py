class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an employee or request id does not exist."""


class DuplicateEmployeeError(DomainError):
    """Raised when registering an employee id that is already taken."""


class InvalidDateRangeError(ValidationError):
    """Raised when a request ends before it starts."""


class InvalidCategoryError(ValidationError):
    """Raised when a leave category name is not recognized."""


class InvalidInputError(ValidationError):
    """Raised by the presentation layer for malformed dates or numbers."""


class AlreadyReviewedError(DomainError):
    """Raised when reviewing a request that is no longer pending."""


class InsufficientBalanceError(DomainError):
    """Raised when a category balance cannot cover the requested days."""

    def __init__(self, *, have: int, need: int):
        super().__init__(f"Insufficient balance: have {have}, need {need}")
        self.have = have
        self.need = need
