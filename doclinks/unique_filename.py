"""Logic for allocating unique output filenames for longnames."""

import logging
import re

from doclinks.link_context import LinkContext

logger = logging.getLogger(__name__)

# characters that cause problems on some filesystems
UNSAFE_CHARS_RE = re.compile(r"[\\/?*:|'\"<>]")
VARIATION_RE = re.compile(r"\([\s\S]*\)$")
HIDDEN_PREFIX_RE = re.compile(r"^[.\-]")


def sanitize_basename(ctx: LinkContext, longname: str | None) -> str:
    """Turn a longname into a filesystem-safe basename (without extension)."""
    basename = longname or ""
    namespaces = ctx.dictionary.get_namespaces()
    if namespaces:
        # module:foo -> module-foo
        ns_re = "^(" + "|".join(re.escape(ns) for ns in namespaces) + "):"
        basename = re.sub(ns_re, r"\1-", basename)
    basename = UNSAFE_CHARS_RE.sub("-", basename)
    basename = basename.replace("~", "-")  # inner
    basename = basename.replace("#", "_")  # instance
    basename = VARIATION_RE.sub("", basename)
    basename = HIDDEN_PREFIX_RE.sub("", basename)
    return basename or "_"


def make_unique_filename(ctx: LinkContext, filename: str, source: str) -> str:
    """Append underscores until the filename is unused, ignoring case."""
    # filenames may not begin with an underscore
    if not filename or filename[0] == "_":
        filename = "-" + filename
    key = filename.lower()
    while key in ctx.files:
        filename += "_"
        key = filename.lower()
    ctx.files[key] = source
    return filename


def get_unique_filename(ctx: LinkContext, longname: str | None) -> str:
    """Convert a string to a unique filename, including the extension.

    Every call allocates a new filename: passing the same string twice yields
    two different filenames. Use ``get_filename`` for cached lookups.
    """
    basename = sanitize_basename(ctx, longname)
    filename = make_unique_filename(ctx, basename, longname or "")
    return filename + ctx.file_extension


def get_filename(ctx: LinkContext, longname: str) -> str:
    """Get a longname's registered filename, allocating one on first use."""
    cached = ctx.link_map.longname_to_url.get(longname)
    if cached is not None:
        return cached
    file_url = get_unique_filename(ctx, longname)
    ctx.link_map.register_link(longname, file_url)
    logger.debug("Allocated %s for %s", file_url, longname)
    return file_url
