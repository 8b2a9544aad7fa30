"""Tests for tutorial URLs and links."""

from doclinks.link_context import LinkContext
from doclinks.tutorial import tutorials_from_dict
from doclinks.tutorial_links import MissingTutorialStyle, to_tutorial, tutorial_to_url
from doclinks.unique_filename import get_filename


def test_tutorial_to_url_is_cached(ctx: LinkContext) -> None:
    """Verify that a tutorial keeps its URL across requests."""
    assert tutorial_to_url(ctx, "intro") == "tutorial-intro.html"
    assert tutorial_to_url(ctx, "intro") == "tutorial-intro.html"
    assert ctx.tutorial_link_map.url_to_name["tutorial-intro.html"] == "intro"


def test_nested_tutorials_are_found(ctx: LinkContext) -> None:
    """Verify that child tutorials can be linked."""
    assert tutorial_to_url(ctx, "advanced") == "tutorial-advanced.html"


def test_tutorials_do_not_share_symbol_filenames(ctx: LinkContext) -> None:
    """Verify that a symbol named like a tutorial gets a different file."""
    tutorial_to_url(ctx, "intro")
    assert get_filename(ctx, "intro") == "intro_.html"


def test_missing_tutorial_url(ctx: LinkContext) -> None:
    """Verify that unknown tutorials have no URL and are reported."""
    assert tutorial_to_url(ctx, "nope") is None
    assert ctx.diagnostics[0].code == "missing-tutorial"
    assert ctx.has_errors()


def test_to_tutorial_link(ctx: LinkContext) -> None:
    """Verify links use the given content or the tutorial title."""
    assert to_tutorial(ctx, "intro") == '<a href="tutorial-intro.html">Introduction</a>'
    assert to_tutorial(ctx, "intro", "Read me") == (
        '<a href="tutorial-intro.html">Read me</a>'
    )


def test_to_tutorial_missing_fallback(ctx: LinkContext) -> None:
    """Verify that missing tutorials render as styled plain text."""
    style = MissingTutorialStyle(prefix="Tutorial: ", tag="em")
    assert to_tutorial(ctx, "nope", missing=style) == "<em>Tutorial: nope</em>"
    style = MissingTutorialStyle(prefix="Tutorial: ", tag="span", classname="missing")
    assert to_tutorial(ctx, "nope", missing=style) == (
        '<span class="missing">Tutorial: nope</span>'
    )
    assert to_tutorial(ctx, "nope") == "nope"


def test_to_tutorial_requires_name(ctx: LinkContext) -> None:
    """Verify that a missing name yields None and an error."""
    assert to_tutorial(ctx, None) is None
    assert to_tutorial(ctx, "") is None
    assert [d.code for d in ctx.diagnostics] == ["missing-argument", "missing-argument"]


def test_tutorials_from_dict() -> None:
    """Verify building a tutorial tree from a mapping."""
    root = tutorials_from_dict(
        {"setup": {"title": "Setup", "children": {"install": {"title": "Install"}}}}
    )
    install = root.get_by_name("install")
    assert install is not None
    assert install.title == "Install"
    assert root.get_by_name("missing") is None
    bare = tutorials_from_dict({"faq": None})
    assert bare.children[0].title == "faq"


def test_tutorial_href_is_encoded() -> None:
    """Verify that the tutorial map keeps the raw URL and the href is encoded."""
    ctx = LinkContext(tutorials=tutorials_from_dict({"über uns": {"title": "About"}}))
    assert to_tutorial(ctx, "über uns") == (
        '<a href="tutorial-%C3%BCber%20uns.html">About</a>'
    )
    assert ctx.tutorial_link_map.name_to_url["über uns"] == "tutorial-über uns.html"
