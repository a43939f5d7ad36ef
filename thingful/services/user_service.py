"""Password policy and public serialization for users."""

import re
from datetime import datetime, timezone

from markupsafe import escape

from thingful.models.model import User
from thingful.schemas.user_schema import PublicUser

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 72

# unanchored search: each class may appear anywhere on the same line, and one run of
# non-whitespace is enough for a match
PASSWORD_COMPLEXITY_REGEX = re.compile(
    r"(?=[^\n\r\u2028\u2029]*[a-z])(?=[^\n\r\u2028\u2029]*[A-Z])"
    r"(?=[^\n\r\u2028\u2029]*[0-9])(?=[^\n\r\u2028\u2029]*[!@#$%^&])\S+"
)


def validate_password(password: str) -> str | None:
    """Check a password against the registration policy.

    Rules are applied in order and the first failure wins.

    Args:
        password: The plaintext password from the request.

    Returns:
        The error message for the first failing rule, or None if the password
        is acceptable.
    """
    if len(password) < PASSWORD_MIN_LENGTH:
        return "Password must be longer than 8 characters"
    if len(password) > PASSWORD_MAX_LENGTH:
        return "Password cannot be longer than 72 characters"
    if password.startswith(" ") or password.endswith(" "):
        return "Password cannot start or end with a space"
    if not PASSWORD_COMPLEXITY_REGEX.search(password):
        return "Password must contain 1 upper case, lower case, number and special character"
    return None


def _sanitize(value: str | None) -> str:
    if value is None:
        return ""
    return str(escape(value))


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive CURRENT_TIMESTAMP values, which are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def serialize_user(user: User) -> PublicUser:
    """Build the public view of a stored user. The password is never included."""
    return PublicUser(
        id=user.id,
        full_name=_sanitize(user.full_name),
        user_name=_sanitize(user.user_name),
        nickname=_sanitize(user.nick_name),
        date_created=_as_utc(user.date_created),
    )
