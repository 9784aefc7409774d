"""Action records emitted by the differ.

Field names and value formats in these models are what the Zendesk import
endpoints expect and must not change.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, validator

from .intercom import Reference


class ActionName(str, Enum):
    """Action name enumeration."""

    REFERENCE = 'reference'
    IMPORT_USER = 'import_user'
    IMPORT_TICKET = 'import_ticket'


class _ActionModel(BaseModel):
    class Config:
        """Pydantic configuration."""

        frozen = True
        use_enum_values = True


class HtmlComment(_ActionModel):
    """Opening comment of a ticket, body kept as HTML."""

    author_id: Any = Field(..., description='Comment author id')
    html_body: Optional[str] = Field(..., description='Raw HTML body')
    created_at: str = Field(..., description='ISO-8601 creation time')


class PlainComment(_ActionModel):
    """Reply or note converted to plain text."""

    author_id: Any = Field(..., description='Comment author id')
    value: str = Field(..., description='Plain text body')
    public: bool = Field(..., description='Visible to the requester')
    created_at: str = Field(..., description='ISO-8601 creation time')


class ImportUserDetails(_ActionModel):
    """Payload for a Zendesk user import."""

    external_id: str = Field(..., description='Intercom reference value')
    name: str = Field(..., description='Display name (falls back to email)')
    email: str = Field(..., description='Email address')


class ImportTicketDetails(_ActionModel):
    """Payload for a Zendesk ticket import."""

    external_id: str = Field(..., description='Intercom reference value')
    tags: List[str] = Field(default_factory=list, description='Ticket tags')
    status: str = Field(..., description='Ticket status')
    requester_id: Any = Field(..., description='Requester id')
    assignee_id: Optional[Any] = Field(default=None, description='Assignee id')
    subject: str = Field(..., description='Plain text subject')
    comments: List[Union[HtmlComment, PlainComment]] = Field(
        ..., description='Opening message followed by conversation parts'
    )
    created_at: str = Field(..., description='ISO-8601 creation time')
    updated_at: str = Field(..., description='ISO-8601 update time')

    @validator('status')
    def validate_status(cls, v):
        """Validate ticket status."""
        valid_statuses = ['pending', 'solved']
        if v not in valid_statuses:
            raise ValueError(f'Status must be one of: {valid_statuses}')
        return v


class ReferenceAction(_ActionModel):
    """Existing Zendesk record already represents the Intercom entity."""

    name: ActionName = Field(
        default=ActionName.REFERENCE.value, description='Action name'
    )
    details: Any = Field(..., description='Zendesk record ID')
    reference: Reference = Field(..., description='Intercom reference')

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain action payload."""
        return self.model_dump()


class ImportUserAction(_ActionModel):
    """Create the Intercom user or admin in Zendesk."""

    name: ActionName = Field(
        default=ActionName.IMPORT_USER.value, description='Action name'
    )
    details: ImportUserDetails = Field(..., description='User payload')
    reference: Reference = Field(..., description='Intercom reference')

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain action payload."""
        return self.model_dump()


class ImportTicketAction(_ActionModel):
    """Import the Intercom conversation as a Zendesk ticket.

    There is no ``reference`` here; the created ticket id comes from the
    import response.
    """

    name: ActionName = Field(
        default=ActionName.IMPORT_TICKET.value, description='Action name'
    )
    details: ImportTicketDetails = Field(..., description='Ticket payload')

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain action payload."""
        return self.model_dump()


Action = Union[ReferenceAction, ImportUserAction, ImportTicketAction]
