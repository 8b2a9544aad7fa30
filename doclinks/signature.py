"""Logic for deriving the display metadata of a member's signature."""

from doclinks.api_path import parse_api_path
from doclinks.build_link import linkto
from doclinks.doclet import Doclet
from doclinks.htmlsafe import htmlsafe
from doclinks.link_context import LinkContext
from doclinks.scope import GLOBAL_NAME

SCOPED_KINDS = {"function", "member", "constant"}


def get_attribs(doclet: Doclet | None) -> list[str]:
    """Retrieve the member attributes for a doclet (``abstract``, ``static``, ``readonly``...)."""
    attribs: list[str] = []
    if doclet is None:
        return attribs

    if doclet.virtual:
        attribs.append("abstract")

    if doclet.access is not None and doclet.access != "public":
        attribs.append(doclet.access)

    if (
        doclet.scope is not None
        and doclet.scope not in ("instance", GLOBAL_NAME)
        and doclet.kind in SCOPED_KINDS
    ):
        attribs.append(doclet.scope)

    if doclet.readonly is True and doclet.kind == "member":
        attribs.append("readonly")

    if doclet.kind == "constant":
        attribs.append("constant")

    if doclet.nullable is True:
        attribs.append("nullable")
    elif doclet.nullable is False:
        attribs.append("non-null")

    return attribs


def get_signature_types(
    ctx: LinkContext, doclet: Doclet, css_class: str | None = None
) -> list[str]:
    """Retrieve links to the allowed types of a member."""
    return [linkto(ctx, t, htmlsafe(t), css_class) for t in doclet.type_names or []]


def get_signature_params(doclet: Doclet, opt_class: str | None = None) -> list[str]:
    """Retrieve the names of the top-level parameters of a member.

    With ``opt_class``, optional parameter names are wrapped in a ``<span>``
    with that class.
    """
    names = []
    for p in doclet.params:
        # skip nested properties such as options.cssClass
        if not p.name or "." in p.name:
            continue
        if p.optional and opt_class:
            names.append(f'<span class="{opt_class}">{p.name}</span>')
        else:
            names.append(p.name)
    return names


def get_signature_returns(
    ctx: LinkContext, doclet: Doclet, css_class: str | None = None
) -> list[str]:
    """Retrieve links to the types a member can return.

    Only the first return entry that declares types is used.
    """
    return_types = next((r.type_names for r in doclet.returns if r.type_names), [])
    return [
        linkto(ctx, r, htmlsafe(parse_api_path("name", r, ctx.path_roots)), css_class)
        for r in return_types
    ]
