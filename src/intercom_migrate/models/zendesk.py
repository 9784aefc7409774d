"""Zendesk destination record model."""

from typing import Union

from pydantic import BaseModel, Field


class ZendeskRecord(BaseModel):
    """Existing Zendesk user or ticket.

    The differ only reads ``id``. Any other fields returned by the Zendesk API
    are kept as extras.
    """

    id: Union[int, str] = Field(..., description='Zendesk record ID')

    class Config:
        """Pydantic configuration."""

        extra = 'allow'
        frozen = True
