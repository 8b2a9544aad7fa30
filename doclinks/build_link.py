"""Logic for turning link targets into HTML anchors."""

import logging
import re

from doclinks.api_path import has_api_path, parse_api_path
from doclinks.create_link import fragment_hash
from doclinks.diagnostic import Diagnostic
from doclinks.encode_uri import encode_uri
from doclinks.format_type_links import format_type_links
from doclinks.known_types import KNOWN_PRIMITIVES, KNOWN_TYPE_EXPRESSIONS, MDN_ARRAY
from doclinks.link_context import LinkContext
from doclinks.stringify_type import stringify_type
from doclinks.type_expression import NameType, TypeExpressionError, parse_type

logger = logging.getLogger(__name__)

URL_PREFIX_RE = re.compile(r"^(?:http|ftp)s?://")
ENCLOSING_BRACKETS_RE = re.compile(r"^<|>$")
INLINE_TAG_RE = re.compile(r"\{@.+\}")
HTML_TAG_RE = re.compile(r"^<[\s\S]+>")

# record types, type unions and type applications
RECORD_RE = re.compile(r"\{.+\}")
UNION_RE = re.compile(r".+\|.+")
APPLICATION_RE = re.compile(r".+<.+>")


def has_url_prefix(text: str) -> bool:
    """Check if the text starts with an http(s) or ftp(s) URL scheme."""
    return bool(URL_PREFIX_RE.match(text))


def is_complex_type_expression(expr: str) -> bool:
    """Check if the expression is a record, union or type application."""
    return bool(
        RECORD_RE.fullmatch(expr)
        or UNION_RE.fullmatch(expr)
        or APPLICATION_RE.fullmatch(expr)
    )


def _render_type_expression(
    expr: str,
    css_class: str | None,
    link_map: dict[str, str],
    path_roots: list[str],
    diagnostics: list[Diagnostic] | None,
) -> str:
    try:
        tree = parse_type(expr)
    except TypeExpressionError as e:
        logger.error("%s", e)
        if diagnostics is not None:
            diagnostics.append(Diagnostic(code="type-parse", message=str(e), subject=expr))
        tree = NameType(expr)
    return format_type_links(stringify_type(tree, css_class, link_map), path_roots)


def build_link(
    target: str | None,
    link_text: str | None = None,
    *,
    link_map: dict[str, str],
    css_class: str | None = None,
    fragment_id: str | None = None,
    monospace: bool = False,
    path_roots: list[str] | None = None,
    diagnostics: list[Diagnostic] | None = None,
) -> str:
    """Build an HTML link to the symbol with the specified longname.

    The target may also be a URL, or a type application such as
    ``Array.<MyClass>`` or ``Array.<(MyClass|YourClass)>``, in which case each
    known name inside it is linked and the link text is ignored. When the
    target has no URL, the link text (or the target) is returned as plain text.
    """
    roots = path_roots or []
    target = target or ""
    class_string = f' class="{css_class}"' if css_class else ""

    # @see <http://example.org> and @see http://example.org
    stripped = ENCLOSING_BRACKETS_RE.sub("", target)
    if has_url_prefix(stripped):
        file_url = stripped
        text = link_text or stripped
    # complex type expressions, skipping inline tags and HTML
    elif (
        target
        and is_complex_type_expression(target)
        and not INLINE_TAG_RE.search(target)
        and not HTML_TAG_RE.match(target)
    ):
        known = KNOWN_TYPE_EXPRESSIONS.get(target.lower())
        if known is None:
            return _render_type_expression(target, css_class, link_map, roots, diagnostics)
        file_url, text = known
    else:
        file_url = link_map.get(target)
        text = link_text or target
        # built-in types, unless the project documents a symbol of that name
        if not file_url and text:
            primitive_url = KNOWN_PRIMITIVES.get(text.lower())
            if primitive_url is not None:
                file_url = primitive_url
                text = text[0].upper() + text[1:]
            elif text == "Array":
                file_url = MDN_ARRAY

    if file_url and has_api_path(text, roots):
        text = parse_api_path("name", text, roots)

    if monospace:
        text = f"<code>{text}</code>"

    if not file_url:
        return text
    href = encode_uri(file_url + fragment_hash(fragment_id))
    return f'<a href="{href}"{class_string}>{text}</a>'


def linkto(
    ctx: LinkContext,
    longname: str | None,
    link_text: str | None = None,
    css_class: str | None = None,
    fragment_id: str | None = None,
) -> str:
    """Build a link using the context's registered longname URLs."""
    return build_link(
        longname,
        link_text,
        link_map=ctx.link_map.longname_to_url,
        css_class=css_class,
        fragment_id=fragment_id,
        path_roots=ctx.path_roots,
        diagnostics=ctx.diagnostics,
    )
