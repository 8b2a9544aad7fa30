"""Rendering of parsed type expressions as HTML with links."""

from doclinks.encode_uri import encode_uri
from doclinks.htmlsafe import htmlsafe
from doclinks.type_expression import (
    AllType,
    ApplicationType,
    FunctionType,
    NameType,
    RecordType,
    TypeNode,
    UnionType,
    UnknownType,
)


def _link_name(name: str, css_class: str | None, link_map: dict[str, str]) -> str:
    url = link_map.get(name)
    if url is None:
        return htmlsafe(name)
    class_string = f' class="{css_class}"' if css_class else ""
    return f'<a href="{encode_uri(url)}"{class_string}>{name}</a>'


def _with_modifiers(node: TypeNode, body: str) -> str:
    if node.nullable is True:
        body = "?" + body
    elif node.nullable is False:
        body = "!" + body
    if node.repeatable:
        body = "..." + body
    if node.optional:
        body += "="
    return body


def stringify_type(
    node: TypeNode, css_class: str | None = None, link_map: dict[str, str] | None = None
) -> str:
    """Render a type tree as HTML-safe text.

    Names found in the link map become anchors; everything else is escaped.
    Array shorthand (``T[]``) is rendered as ``Array.<T>``.
    """
    links = link_map or {}

    def render(n: TypeNode | None) -> str:
        if n is None:
            return ""
        if isinstance(n, NameType):
            body = _link_name(n.name, css_class, links)
        elif isinstance(n, AllType):
            body = "*"
        elif isinstance(n, UnknownType):
            body = "?"
        elif isinstance(n, UnionType):
            body = "(" + "|".join(render(e) for e in n.elements) + ")"
        elif isinstance(n, ApplicationType):
            params = ", ".join(render(p) for p in n.params)
            body = f"{render(n.base)}.&lt;{params}>"
        elif isinstance(n, RecordType):
            fields = []
            for f in n.fields:
                key = htmlsafe(f.key)
                fields.append(f"{key}: {render(f.value)}" if f.value is not None else key)
            body = "{" + ", ".join(fields) + "}"
        elif isinstance(n, FunctionType):
            params = []
            if n.this is not None:
                params.append("this:" + render(n.this))
            if n.new is not None:
                params.append("new:" + render(n.new))
            params.extend(render(p) for p in n.params)
            body = "function(" + ", ".join(params) + ")"
            if n.returns is not None:
                body += ": " + render(n.returns)
        else:
            raise TypeError(f"unknown type node: {n!r}")
        return _with_modifiers(n, body)

    return render(node)
