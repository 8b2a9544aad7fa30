"""Logic for deriving the URL of a doclet's generated documentation."""

import re

from doclinks.doclet import Doclet
from doclinks.encode_uri import encode_uri
from doclinks.link_context import LinkContext
from doclinks.scope import GLOBAL_NAME, SCOPE_TO_PUNC
from doclinks.unique_filename import get_filename
from doclinks.unique_id import get_id

MODULE_NAMESPACE = "module:"

# each container gets its own output file
CONTAINERS = frozenset(
    {"class", "module", "external", "namespace", "mixin", "interface"}
)

KIND_PREFIX_RE = re.compile(r"(\S+):")


def is_module_exports(doclet: Doclet) -> bool:
    """Check if a symbol is the only symbol exported by a module.

    As in ``module.exports = function() {};``, the longname equals the name.
    """
    return bool(
        doclet.longname
        and doclet.longname == doclet.name
        and doclet.longname.startswith(MODULE_NAMESPACE)
        and doclet.kind != "module"
    )


def fragment_hash(fragment_id: str | None) -> str:
    """Format a fragment ID as a URL suffix."""
    if not fragment_id:
        return ""
    return "#" + fragment_id


def format_name_for_link(ctx: LinkContext, doclet: Doclet) -> str:
    """Build the fragment label for a doclet: scope punctuation plus name."""
    namespace = f"{doclet.kind}:" if ctx.dictionary.is_namespace(doclet.kind) else ""
    label = namespace + (doclet.name or "") + (doclet.variation or "")
    scope_punc = SCOPE_TO_PUNC.get(doclet.scope or "", "")
    # '#' already starts the fragment; 'foo.html##bar' is legal but confusing
    if scope_punc != "#":
        label = scope_punc + label
    return label


def _fake_container(doclet: Doclet) -> str | None:
    """Return the container kind implied by a mistagged doclet's longname."""
    if doclet.kind in CONTAINERS:
        return None
    match = KIND_PREFIX_RE.search(doclet.longname)
    if match and match.group(1) in CONTAINERS:
        return match.group(1)
    return None


def get_link_target(ctx: LinkContext, doclet: Doclet) -> str:
    """Get the unencoded ``filename#fragment`` of a doclet's documentation.

    Containers (and a module's sole export) own a file, so their target is a
    bare filename. Anything else lives inside another file and gets a fragment ID.
    The link map stores targets in this form.
    """
    longname = doclet.longname
    fragment = ""

    if doclet.kind in CONTAINERS or is_module_exports(doclet):
        filename = get_filename(ctx, longname)
    elif _fake_container(doclet) is not None:
        # longname implies its own file but the kind says otherwise
        filename = get_filename(ctx, doclet.memberof or longname)
        if doclet.name != longname:
            fragment = get_id(ctx, filename, longname, format_name_for_link(ctx, doclet))
    else:
        filename = get_filename(ctx, doclet.memberof or GLOBAL_NAME)
        if doclet.name != longname or doclet.scope == GLOBAL_NAME:
            fragment = get_id(ctx, filename, longname, format_name_for_link(ctx, doclet))

    return filename + fragment_hash(fragment)


def create_link(ctx: LinkContext, doclet: Doclet) -> str:
    """Create the URL that points to a doclet's generated documentation."""
    return encode_uri(get_link_target(ctx, doclet))
