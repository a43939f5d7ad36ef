"""Application exceptions for the Thingful API.

Each exception carries the user-facing ``message`` that the exception handlers
in ``thingful.main`` return as ``{"error": message}``.
"""


class ThingfulError(Exception):
    """Base exception for all Thingful API errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ThingfulError):
    """Raised when request data fails validation."""

    pass


class MissingFieldError(ValidationError):
    """Raised when a required field is absent from the request body."""

    def __init__(self, field: str):
        """Initialize the exception.

        Args:
            field: Name of the missing request body field.
        """
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class ConflictError(ThingfulError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class UsernameTakenError(ConflictError):
    """Raised when the requested user_name belongs to another user."""

    def __init__(self, user_name: str):
        self.user_name = user_name
        super().__init__("Username already taken")


class UserNotFoundError(ThingfulError):
    """Raised when a requested user does not exist."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("User doesn't exist")


class StorageError(ThingfulError):
    """Raised when the database fails in a way the request cannot recover from."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
