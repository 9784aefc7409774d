"""Data models for Intercom and Zendesk entities."""

from .intercom import (
    Reference,
    IntercomUser,
    IntercomAdmin,
    IntercomConversation,
    SourceEntity,
    parse_source_entity,
)
from .zendesk import ZendeskRecord
from .action import (
    ActionName,
    Action,
    ReferenceAction,
    ImportUserAction,
    ImportUserDetails,
    ImportTicketAction,
    ImportTicketDetails,
    HtmlComment,
    PlainComment,
)

__all__ = [
    'Reference',
    'IntercomUser',
    'IntercomAdmin',
    'IntercomConversation',
    'SourceEntity',
    'parse_source_entity',
    'ZendeskRecord',
    'ActionName',
    'Action',
    'ReferenceAction',
    'ImportUserAction',
    'ImportUserDetails',
    'ImportTicketAction',
    'ImportTicketDetails',
    'HtmlComment',
    'PlainComment',
]
