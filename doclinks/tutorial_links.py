"""Logic for linking to tutorials."""

from dataclasses import dataclass

from doclinks.encode_uri import encode_uri
from doclinks.link_context import LinkContext
from doclinks.unique_filename import get_unique_filename

TUTORIAL_PREFIX = "tutorial-"


@dataclass(frozen=True)
class MissingTutorialStyle:
    """How to display the name of a tutorial that does not exist."""

    prefix: str = ""
    tag: str | None = None
    classname: str | None = None


def tutorial_to_url(ctx: LinkContext, name: str) -> str | None:
    """Get the URL of a tutorial, allocating one on first use.

    Returns None (and records a diagnostic) if there is no such tutorial.
    """
    node = ctx.tutorials.get_by_name(name)
    if node is None:
        ctx.report("missing-tutorial", f"No such tutorial: {name}", name)
        return None

    if node.name not in ctx.tutorial_link_map.name_to_url:
        file_url = TUTORIAL_PREFIX + get_unique_filename(ctx, node.name)
        ctx.tutorial_link_map.register(node.name, file_url)

    return ctx.tutorial_link_map.name_to_url[node.name]


def to_tutorial(
    ctx: LinkContext,
    name: str | None,
    content: str | None = None,
    missing: MissingTutorialStyle | None = None,
) -> str | None:
    """Build a link to a tutorial, or its name if the tutorial is missing.

    Missing tutorial names get the prefix, tag and class of ``missing``.
    """
    if not name:
        ctx.report("missing-argument", "Missing required parameter: tutorial")
        return None

    node = ctx.tutorials.get_by_name(name)
    if node is None:
        ctx.report("missing-tutorial", f"No such tutorial: {name}", name, "warning")
        style = missing or MissingTutorialStyle()
        link = style.prefix + name
        if style.tag:
            class_string = f' class="{style.classname}"' if style.classname else ""
            link = f"<{style.tag}{class_string}>{link}</{style.tag}>"
        return link

    content = content or node.title
    return f'<a href="{encode_uri(tutorial_to_url(ctx, name))}">{content}</a>'
