"""Logic for walking a doclet's chain of parents."""

from doclinks.build_link import linkto
from doclinks.doclet import Doclet
from doclinks.doclet_store import DocletStore
from doclinks.link_context import LinkContext
from doclinks.scope import SCOPE_TO_PUNC


def get_ancestors(store: DocletStore, doclet: Doclet) -> list[Doclet]:
    """Retrieve a doclet's ancestors, from most to least distant."""
    ancestors: list[Doclet] = []
    seen = {doclet.longname}
    doc: Doclet | None = doclet
    while doc is not None and doc.memberof is not None:
        doc = store.find_one(longname=doc.memberof)
        if doc is None or doc.longname in seen:
            break
        seen.add(doc.longname)
        ancestors.insert(0, doc)
    return ancestors


def get_ancestor_links(
    ctx: LinkContext, store: DocletStore, doclet: Doclet, css_class: str | None = None
) -> list[str]:
    """Retrieve links to a doclet's ancestors.

    The last link is followed by the punctuation of the doclet's own scope.
    """
    links = []
    for ancestor in get_ancestors(store, doclet):
        link_text = SCOPE_TO_PUNC.get(ancestor.scope or "", "") + (ancestor.name or "")
        links.append(linkto(ctx, ancestor.longname, link_text, css_class))

    if links:
        links[-1] += SCOPE_TO_PUNC.get(doclet.scope or "", "")
    return links
