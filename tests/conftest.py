"""Shared fixtures for the link resolution tests."""

import pytest

from doclinks.link_context import LinkContext
from doclinks.tutorial import Tutorial


@pytest.fixture
def tutorials() -> Tutorial:
    """Fixture providing a small tutorial tree."""
    root = Tutorial()
    intro = Tutorial(name="intro", title="Introduction")
    intro.add_child(Tutorial(name="advanced", title="Advanced Topics"))
    root.add_child(intro)
    return root


@pytest.fixture
def ctx(tutorials: Tutorial) -> LinkContext:
    """Fixture providing a fresh link context with the default settings."""
    return LinkContext(tutorials=tutorials)
