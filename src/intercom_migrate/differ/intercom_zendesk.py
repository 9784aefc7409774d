"""Intercom to Zendesk differ.

Compares one Intercom entity with its Zendesk counterpart, if any, and
returns the actions the caller has to carry out. Nothing is fetched or
written here.
"""

from typing import Any, List, Mapping, Optional

from loguru import logger

from ..exceptions import MissingRequiredFieldError, UnsupportedEntityKindError
from ..models.action import (
    Action,
    HtmlComment,
    ImportTicketAction,
    ImportTicketDetails,
    ImportUserAction,
    ImportUserDetails,
    PlainComment,
    ReferenceAction,
)
from ..models.intercom import IntercomConversation, SourceEntity
from ..utils.html import html_to_ascii, strip_html
from ..utils.timestamps import iso_time

USER_KINDS = ('user', 'admin')
CONVERSATION_KIND = 'conversation'


def _fetch(mapping: Mapping[str, Any], key: str, container: str) -> Any:
    try:
        return mapping[key]
    except KeyError:
        raise MissingRequiredFieldError(key, container) from None


class IntercomZendeskDiffer:
    """Works out which Zendesk actions an Intercom entity needs."""

    def __init__(self):
        self.logger = logger.bind(component='IntercomZendeskDiffer')

    def diff(
        self, source: SourceEntity, destination: Optional[Any] = None
    ) -> List[Action]:
        """Compare an Intercom entity with its Zendesk counterpart.

        Args:
            source: Intercom user, admin or conversation
            destination: Existing Zendesk record exposing ``id``, or None

        Returns:
            Actions to perform, in order

        Raises:
            UnsupportedEntityKindError: If source is not a recognized variant
            MissingRequiredFieldError: If a conversation lacks a required field
        """
        kind = getattr(source, 'kind', None)

        if kind in USER_KINDS:
            return self.diff_user(source, destination)
        if kind == CONVERSATION_KIND:
            return self.diff_ticket(source, destination)

        self.logger.error(f'Cannot diff {type(source).__name__} with kind {kind!r}')
        raise UnsupportedEntityKindError(
            kind if kind is not None else type(source).__name__
        )

    def diff_user(self, user, zendesk_user: Optional[Any] = None) -> List[Action]:
        """Reference an existing Zendesk user or import a new one."""
        if zendesk_user is not None:
            self.logger.debug(
                f'{type(user).__name__} {user.reference.value} already in Zendesk '
                f'as {zendesk_user.id}'
            )
            return [self.reference(user, zendesk_user)]

        self.logger.debug(
            f'{type(user).__name__} {user.reference.value} will be imported'
        )
        return [self.import_user(user)]

    def diff_ticket(
        self, conversation: IntercomConversation, zendesk_ticket: Optional[Any] = None
    ) -> List[Action]:
        """Import a conversation unless it already exists as a ticket.

        Existing tickets are never updated.
        """
        if zendesk_ticket is not None:
            self.logger.debug(
                f'Conversation {conversation.reference.value} already imported '
                f'as ticket {zendesk_ticket.id}, skipping'
            )
            return []

        self.logger.debug(
            f'Conversation {conversation.reference.value} will be imported'
        )
        return [self.import_ticket(conversation)]

    @staticmethod
    def reference(source, destination) -> ReferenceAction:
        """Build a reference action mapping source onto destination."""
        return ReferenceAction(details=destination.id, reference=source.reference)

    @staticmethod
    def import_user(user) -> ImportUserAction:
        """Build an import_user action.

        An absent or empty name falls back to the email address.
        """
        return ImportUserAction(
            details=ImportUserDetails(
                external_id=user.reference.value,
                name=user.name or user.email,
                email=user.email,
            ),
            reference=user.reference,
        )

    @staticmethod
    def import_ticket(conversation: IntercomConversation) -> ImportTicketAction:
        """Build an import_ticket action.

        The opening message keeps its HTML body; every conversation part is
        converted to plain text and is public unless it is a note.
        """
        message = conversation.conversation_message
        subject = strip_html(_fetch(message, 'subject', 'conversation_message'))

        comments = [
            HtmlComment(
                author_id=conversation.user,
                html_body=_fetch(message, 'body', 'conversation_message'),
                created_at=iso_time(conversation.created_at),
            )
        ]
        for part in conversation.conversation_parts:
            comments.append(
                PlainComment(
                    author_id=_fetch(part, 'author', 'conversation_parts'),
                    value=html_to_ascii(_fetch(part, 'body', 'conversation_parts')),
                    public=_fetch(part, 'part_type', 'conversation_parts') != 'note',
                    created_at=iso_time(
                        _fetch(part, 'created_at', 'conversation_parts')
                    ),
                )
            )

        return ImportTicketAction(
            details=ImportTicketDetails(
                external_id=conversation.reference.value,
                tags=list(conversation.tags),
                status='pending' if conversation.open else 'solved',
                requester_id=conversation.user,
                assignee_id=conversation.assignee,
                subject=subject,
                comments=comments,
                created_at=iso_time(conversation.created_at),
                updated_at=iso_time(conversation.updated_at),
            )
        )


def diff(source: SourceEntity, destination: Optional[Any] = None) -> List[Action]:
    """Diff a single Intercom entity against its Zendesk counterpart."""
    return IntercomZendeskDiffer().diff(source, destination)
