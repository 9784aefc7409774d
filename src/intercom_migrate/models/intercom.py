"""Intercom source entity models."""

from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, Field, validator

from ..exceptions import UnsupportedEntityKindError


class Reference(BaseModel):
    """Opaque Intercom identifier.

    Callers keep the reference attached to ``reference`` and ``import_user``
    actions so the created Zendesk id can be recorded against it.
    """

    value: str = Field(..., description='Serializable identifier value')

    @validator('value', pre=True)
    def coerce_value(cls, v):
        """Accept numeric identifiers."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    class Config:
        """Pydantic configuration."""

        frozen = True


class _IntercomPerson(BaseModel):
    """Fields shared by Intercom users and admins."""

    reference: Reference = Field(..., description='Intercom reference')
    name: Optional[str] = Field(default=None, description='Display name')
    email: str = Field(..., description='Email address')

    @validator('reference', pre=True)
    def coerce_reference(cls, v):
        """Accept a bare identifier in place of a reference mapping."""
        if isinstance(v, (str, int)) and not isinstance(v, bool):
            return {'value': str(v)}
        return v

    class Config:
        """Pydantic configuration."""

        frozen = True


class IntercomUser(_IntercomPerson):
    """Intercom end user."""

    kind: Literal['user'] = Field(default='user', description='Entity kind')


class IntercomAdmin(_IntercomPerson):
    """Intercom admin (teammate)."""

    kind: Literal['admin'] = Field(default='admin', description='Entity kind')


class IntercomConversation(BaseModel):
    """Intercom conversation.

    ``conversation_message`` and each entry of ``conversation_parts`` are kept
    as plain mappings as returned by the Intercom API. The differ checks for
    the keys it needs when building the ticket.
    """

    kind: Literal['conversation'] = Field(
        default='conversation', description='Entity kind'
    )
    reference: Reference = Field(..., description='Intercom reference')
    tags: List[str] = Field(default_factory=list, description='Tag names')
    open: bool = Field(..., description='Conversation is still open')
    user: Any = Field(..., description='Requester id')
    assignee: Optional[Any] = Field(default=None, description='Assignee id')

    # Timestamps (POSIX seconds)
    created_at: float = Field(..., description='Creation timestamp')
    updated_at: float = Field(..., description='Last update timestamp')

    conversation_message: Dict[str, Any] = Field(
        ..., description='Opening message with subject and body'
    )
    conversation_parts: List[Dict[str, Any]] = Field(
        default_factory=list, description='Replies, notes and other parts'
    )

    @validator('reference', pre=True)
    def coerce_reference(cls, v):
        """Accept a bare identifier in place of a reference mapping."""
        if isinstance(v, (str, int)) and not isinstance(v, bool):
            return {'value': str(v)}
        return v

    class Config:
        """Pydantic configuration."""

        frozen = True


SourceEntity = Union[IntercomUser, IntercomAdmin, IntercomConversation]

SOURCE_KINDS = {
    'user': IntercomUser,
    'admin': IntercomAdmin,
    'conversation': IntercomConversation,
}


def parse_source_entity(data: Mapping[str, Any]) -> SourceEntity:
    """Build the source entity variant named by ``data['kind']``.

    Args:
        data: Entity mapping including a ``kind`` key

    Returns:
        Parsed source entity

    Raises:
        UnsupportedEntityKindError: If kind is missing or unknown
    """
    kind = data.get('kind')
    model = SOURCE_KINDS.get(kind)
    if model is None:
        raise UnsupportedEntityKindError(kind)
    return model(**data)
