"""Tests for ancestor lookups."""

from doclinks.ancestors import get_ancestor_links, get_ancestors
from doclinks.doclet import Doclet
from doclinks.doclet_store import DocletStore
from doclinks.link_context import LinkContext
from doclinks.unique_filename import get_filename


def _store() -> DocletStore:
    return DocletStore(
        [
            Doclet("a", name="a", kind="namespace"),
            Doclet("a.b", name="b", kind="class", memberof="a", scope="static"),
            Doclet("a.b#c", name="c", kind="member", memberof="a.b", scope="instance"),
        ]
    )


def test_get_ancestors_order() -> None:
    """Verify that ancestors are listed from most to least distant."""
    store = _store()
    member = store.find_one(longname="a.b#c")
    assert [d.longname for d in get_ancestors(store, member)] == ["a", "a.b"]
    assert get_ancestors(store, store.find_one(longname="a")) == []


def test_get_ancestors_stops_on_cycles() -> None:
    """Verify that a memberof cycle does not loop forever."""
    store = DocletStore(
        [
            Doclet("x", name="x", memberof="y"),
            Doclet("y", name="y", memberof="x"),
        ]
    )
    assert [d.longname for d in get_ancestors(store, store.find_one(longname="x"))] == [
        "y"
    ]


def test_get_ancestors_missing_parent() -> None:
    """Verify that an undocumented parent ends the chain."""
    store = DocletStore([Doclet("p.q", name="q", memberof="p")])
    assert get_ancestors(store, store.find_one(longname="p.q")) == []


def test_get_ancestor_links(ctx: LinkContext) -> None:
    """Verify link texts use scope punctuation and end with the doclet's own."""
    get_filename(ctx, "a")
    get_filename(ctx, "a.b")
    store = _store()
    links = get_ancestor_links(ctx, store, store.find_one(longname="a.b#c"), "anc")
    assert links == [
        '<a href="a.html" class="anc">a</a>',
        '<a href="a.b.html" class="anc">.b</a>#',
    ]
