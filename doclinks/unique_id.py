"""Logic for allocating fragment IDs that are unique within one file."""

import re

from doclinks.link_context import LinkContext

WHITESPACE_RE = re.compile(r"\s")


def get_unique_id(ctx: LinkContext, filename: str, candidate: str) -> str:
    """Convert a candidate into an ID that is unique for the given file.

    IDs that differ only by case are not unique. The same ID may be used in
    different files.
    """
    # HTML5 IDs cannot contain whitespace
    fragment = WHITESPACE_RE.sub("", candidate)
    taken = ctx.ids.setdefault(filename, {})
    key = fragment.lower()
    while key in taken:
        fragment += "_"
        key = fragment.lower()
    taken[key] = fragment
    return fragment


def get_id(ctx: LinkContext, filename: str, longname: str, candidate: str | None) -> str:
    """Get a longname's registered fragment ID, allocating one if requested.

    The first registration wins; later candidates for the same longname are
    ignored. Returns an empty string when no ID exists and none is requested.
    """
    cached = ctx.link_map.longname_to_id.get(longname)
    if cached is not None:
        return cached
    if not candidate:
        return ""
    fragment = get_unique_id(ctx, filename, candidate)
    ctx.link_map.register_id(longname, fragment)
    return fragment
