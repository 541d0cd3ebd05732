"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from typing import Optional, Union

from animetrack.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code=ErrorCode.INVALID_EMAIL)


class DuplicateUserError(ConflictError):
    """Email already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            code=ErrorCode.DUPLICATE_USER,
            details={"email": email},
        )


class InvalidPasswordError(ValidationError):
    """Password missing or shorter than the required length."""

    def __init__(self, min_length: int) -> None:
        self.min_length = min_length
        super().__init__(
            f"Password must be at least {min_length} characters",
            code=ErrorCode.INVALID_PASSWORD,
            details={"min_length": min_length},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, identifier: Optional[Union[int, str]] = None) -> None:
        self.identifier = identifier
        message = (
            "User not found" if identifier is None else f"User not found: {identifier}"
        )
        super().__init__(
            message,
            code=ErrorCode.USER_NOT_FOUND,
            details={"identifier": identifier},
        )


class InvalidOperationError(BusinessRuleViolation):
    """A list operation was rejected."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_OPERATION,
        details: Optional[dict] = None,
    ) -> None:
        super().__init__(message, code, details)


class MediaAlreadyListedError(InvalidOperationError):
    """The entry already sits in one of the user's lists."""

    def __init__(
        self,
        media_id: Optional[int] = None,
        category: Optional[str] = None,
    ) -> None:
        self.media_id = media_id
        self.category = category
        super().__init__(
            "Entry already in a list",
            code=ErrorCode.MEDIA_ALREADY_LISTED,
            details={"media_id": media_id, "category": category},
        )


class InvalidListCategoryError(InvalidOperationError):
    """Value is not one of the known list categories."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid category: {value!r}",
            code=ErrorCode.INVALID_LIST_CATEGORY,
            details={"value": str(value)},
        )
