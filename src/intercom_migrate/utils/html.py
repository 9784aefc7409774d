"""HTML to text conversion for ticket subjects and comments."""

import copy
import re
from typing import Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

# Elements followed by a blank line in plain text output
BLOCK_ELEMENTS = ['p', 'div', 'address']

# Elements replaced outright by plain text
SWAPS = {
    'br': '\n',
    'hr': '\n' + '-' * 70 + '\n',
}

# ASCII whitespace only; non-breaking spaces are content
_WHITESPACE = re.compile(r'[ \t\r\n\f\v]+')

HtmlInput = Union[str, Tag]


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or '', 'html.parser')


def strip_html(html: str) -> str:
    """Return the text content of an HTML string with all tags removed.

    Entities are decoded. Whitespace is left as the parser produced it.
    """
    return _parse(html).get_text()


def html_to_ascii(html: HtmlInput) -> str:
    """Convert rich HTML into readable plain text.

    Whitespace runs inside text nodes collapse to a single space, ``<br>``
    becomes a newline, ``<hr>`` becomes a line of 70 dashes and every
    ``p``, ``div`` and ``address`` is followed by a blank line.

    Args:
        html: HTML string, or an already parsed document or tag. A parsed
            document is copied and left untouched.

    Returns:
        Plain text with surrounding whitespace stripped
    """
    if isinstance(html, BeautifulSoup):
        doc = copy.copy(html)
    elif isinstance(html, Tag):
        # Detached tag needs a parent so it can be swapped or suffixed itself
        doc = _parse('')
        doc.append(copy.copy(html))
    else:
        doc = _parse(html)

    # Collapse whitespace before any newlines are introduced
    for text in list(doc.find_all(string=True)):
        if isinstance(text, PreformattedString):
            continue
        collapsed = _WHITESPACE.sub(' ', text)
        if collapsed != text:
            text.replace_with(NavigableString(collapsed))

    for node in doc.find_all(list(SWAPS)):
        node.replace_with(SWAPS[node.name])

    for node in doc.find_all(BLOCK_ELEMENTS):
        node.insert_after('\n\n')

    return doc.get_text().strip()
