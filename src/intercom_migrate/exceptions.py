"""Intercom to Zendesk differ exceptions."""

from typing import Any, Optional


class DifferError(Exception):
    """Base exception for differ errors."""

    pass


class UnsupportedEntityKindError(DifferError):
    """Source entity is not a user, admin or conversation."""

    def __init__(self, kind: Any, message: Optional[str] = None):
        """Initialize unsupported entity kind error.

        Args:
            kind: The kind (or type name) that could not be handled
            message: Optional custom error message
        """
        super().__init__(message or f'Unsupported source entity kind: {kind!r}')
        self.kind = kind


class MissingRequiredFieldError(DifferError):
    """A field required to build an action is absent."""

    def __init__(self, field: str, container: str):
        """Initialize missing field error.

        Args:
            field: Name of the missing field
            container: Where the field was expected (e.g. conversation_message)
        """
        super().__init__(f'Missing required field {field!r} in {container}')
        self.field = field
        self.container = container
