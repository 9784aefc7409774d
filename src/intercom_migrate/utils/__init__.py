"""Helpers shared by the differ and the CLI."""

from .html import strip_html, html_to_ascii
from .timestamps import iso_time

__all__ = ['strip_html', 'html_to_ascii', 'iso_time']
