# core/identifiers.py
import re
import uuid

from core.errors import InvalidIdentifierError

IDENTIFIER_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def new_identifier() -> str:
    """Generate a new record identifier (32 lowercase hex characters)"""
    return uuid.uuid4().hex


def is_valid_identifier(value: object) -> bool:
    return isinstance(value, str) and IDENTIFIER_PATTERN.match(value) is not None


def require_identifier(value: object) -> str:
    """Return ``value`` unchanged if it is a well-formed identifier.

    Raises:
        InvalidIdentifierError: If the value does not have the identifier shape
    """
    if not is_valid_identifier(value):
        raise InvalidIdentifierError(value)
    return value
