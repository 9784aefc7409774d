"""Intercom to Zendesk Migration Tool

Compares Intercom users, admins and conversations against their Zendesk
counterparts and produces the declarative actions needed to migrate them.
"""

__version__ = '0.1.0'
__author__ = 'Intercom Migration Team'
__email__ = 'team@example.com'

from .differ import IntercomZendeskDiffer, diff

__all__ = ['IntercomZendeskDiffer', 'diff']
