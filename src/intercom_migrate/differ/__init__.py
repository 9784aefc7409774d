"""Differ between Intercom sources and Zendesk destinations."""

from .intercom_zendesk import IntercomZendeskDiffer, diff

__all__ = ['IntercomZendeskDiffer', 'diff']
