"""Utility for linking author tags to e-mail addresses."""

import re

from doclinks.htmlsafe import htmlsafe

AUTHOR_RE = re.compile(r"^\s?([\s\S]+)\b\s+<(\S+@\S+)>\s?$")


def resolve_author_links(text: str) -> str:
    """Convert text like ``Jane Doe <jdoe@example.org>`` into a mailto link."""
    m = AUTHOR_RE.match(text)
    if m:
        return f'<a href="mailto:{m.group(2)}">{htmlsafe(m.group(1))}</a>'
    return htmlsafe(text)
