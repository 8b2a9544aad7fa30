"""Logic for resolving {@link ...} and {@tutorial ...} tags in free text."""

import re

from doclinks.build_link import build_link, has_url_prefix
from doclinks.link_context import LinkContext
from doclinks.tutorial_links import to_tutorial

# [leading text]{@tag target text}; the bracket must touch the tag
INLINE_TAG_RE = re.compile(
    r"(?:\[(?P<leading>[^\]\n{]+)\])?"
    r"\{@(?P<tag>linkcode|linkplain|link|tutorial)\s+(?P<text>[\s\S]+?)\}",
    re.IGNORECASE,
)
WHITESPACE_RE = re.compile(r"\s")
NEWLINES_RE = re.compile(r"\n+")


def split_link_text(text: str) -> tuple[str, str | None]:
    """Split tag text into a target and optional link text.

    Splits on the first pipe, or on the first whitespace if there is no pipe.
    """
    split_index = text.find("|")
    if split_index == -1:
        m = WHITESPACE_RE.search(text)
        split_index = m.start() if m else -1

    if split_index == -1:
        return text, None

    link_text = NEWLINES_RE.sub(" ", text[split_index + 1 :]).strip()
    target = text[:split_index].strip()
    return target or text, link_text or None


def use_monospace(ctx: LinkContext, tag: str, text: str) -> bool:
    """Decide whether a link's text is shown in a monospace font."""
    if has_url_prefix(text):
        return False
    if tag == "linkplain":
        return False
    if tag == "linkcode":
        return True
    return ctx.monospace_links or ctx.clever_links


def resolve_links(ctx: LinkContext, text: str) -> str:
    """Find {@link ...} and {@tutorial ...} tags in text and turn them into links."""
    if not text:
        return ""

    def repl(m: re.Match) -> str:
        tag = m.group("tag").lower()
        tag_text = m.group("text").strip()
        leading = m.group("leading")

        if tag == "tutorial":
            link = to_tutorial(ctx, tag_text, leading)
            return m.group(0) if link is None else link

        target, link_text = split_link_text(tag_text)
        return build_link(
            target,
            leading or link_text,
            link_map=ctx.link_map.longname_to_url,
            monospace=use_monospace(ctx, tag, tag_text),
            path_roots=ctx.path_roots,
            diagnostics=ctx.diagnostics,
        )

    return INLINE_TAG_RE.sub(repl, text)
