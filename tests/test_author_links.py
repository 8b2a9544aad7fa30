"""Tests for author links."""

from doclinks.author_links import resolve_author_links


def test_author_with_email() -> None:
    """Verify that an e-mail address becomes a mailto link."""
    assert resolve_author_links("Jane Doe <jdoe@example.org>") == (
        '<a href="mailto:jdoe@example.org">Jane Doe</a>'
    )


def test_author_without_email() -> None:
    """Verify that other text is only escaped."""
    assert resolve_author_links("Tom & Jerry") == "Tom &amp; Jerry"
    assert resolve_author_links("A <b>") == "A &lt;b>"
