"""Post-processing of rendered type links that point into API paths.

A rendered ``Array.&lt;<a href="module-esri-Graphic.html">module:esri/Graphic</a>>``
becomes ``<a href="module-esri-Graphic.html">Graphic[]</a>``. Only link text
changes; hrefs are left alone.
"""

import re

from doclinks.api_path import has_api_path, parse_api_path

ANCHOR_RE = re.compile(r"(<a\b[^>]*>)(.*?)(</a>)", re.DOTALL)
ARRAY_OF_ANCHOR_RE = re.compile(r"Array\.&lt;(<a\b[^>]*>)([^<]*)</a>>")


def strip_link_text_paths(html: str, roots: list[str]) -> str:
    """Reduce the text of every anchor to the bare API name."""

    def repl(m: re.Match) -> str:
        return m.group(1) + parse_api_path("name", m.group(2), roots) + m.group(3)

    return ANCHOR_RE.sub(repl, html)


def rewrite_array_links(html: str) -> str:
    """Spell linked ``Array.<T>`` as ``T[]`` inside the anchor."""
    return ARRAY_OF_ANCHOR_RE.sub(r"\1\2[]</a>", html)


def format_type_links(html: str, roots: list[str]) -> str:
    """Apply the API path clean-up when the rendered type refers to an API path."""
    if not has_api_path(html, roots):
        return html
    return rewrite_array_links(strip_link_text_paths(html, roots))
