"""Logic for nesting longnames into a navigation tree."""

from dataclasses import dataclass, field

from doclinks.doclet import Doclet
from doclinks.scope import PUNC_TO_SCOPE


@dataclass
class LongnameNode:
    """One level of the longname tree."""

    name: str
    longname: str
    doclet: Doclet | None = None
    children: dict[str, "LongnameNode"] = field(default_factory=dict)


def split_longname(longname: str) -> list[str]:
    """Split a longname into chunks at scope punctuation.

    Each chunk after the first starts with its punctuation, so joining the
    chunks gives the longname back. Quoted names and variations stay whole.
    """
    chunks: list[str] = []
    current = ""
    quote: str | None = None
    depth = 0
    for ch in longname:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(depth - 1, 0)
        elif ch in PUNC_TO_SCOPE and depth == 0 and current:
            chunks.append(current)
            current = ""
        current += ch
    if current:
        chunks.append(current)
    return chunks


def longnames_to_tree(
    longnames: list[str], doclets: dict[str, Doclet] | None = None
) -> dict[str, LongnameNode]:
    """Nest longnames by their scope chunks.

    ``a.b`` and ``a#c`` become children ``.b`` and ``#c`` of ``a``; intermediate
    levels are created even when they are not documented themselves.
    """
    lookup = doclets or {}
    tree: dict[str, LongnameNode] = {}
    for longname in longnames:
        if not longname:
            continue
        level = tree
        current = ""
        for chunk in split_longname(longname):
            current += chunk
            node = level.get(chunk)
            if node is None:
                node = LongnameNode(name=chunk, longname=current)
                level[chunk] = node
            node.doclet = lookup.get(current, node.doclet)
            level = node.children
    return tree
