"""Logic for splitting API module paths such as ``module:esri/layers/Layer``.

Longnames of symbols that live in an AMD-style package read like
``Class: root/foo/bar/Name``. Display text only needs ``Name``, while the
directory part (``root/foo/bar``) is useful for headings.
"""

import re

# "Module: " or "Class: " before a path
TYPE_ONLY_RE = re.compile(r"\w*:\s*")
# "/Name" at the end of root/foo/bar/Name
TRAILING_NAME_RE = re.compile(r"/\w*$", re.MULTILINE)
# "module:root/foo/bar/" in module:root/foo/bar/Name
TYPE_PATH_RE = re.compile(r"(?:[Mm]odule|[Cc]lass|[Ff]unction):\s*(?:\w*/)+")


def _root_path_re(roots: list[str]) -> re.Pattern[str] | None:
    """Match "root/foo/bar/" for any of the configured roots."""
    if not roots:
        return None
    alternatives = "|".join(re.escape(r) for r in roots)
    return re.compile(rf"(?:{alternatives})/(?:\w*/)*")


def has_api_path(text: str, roots: list[str]) -> bool:
    """Check if the text contains a path under one of the roots."""
    root_re = _root_path_re(roots)
    return bool(root_re and root_re.search(text))


def parse_api_path(parse_type: str, value: str, roots: list[str]) -> str:
    """Extract the ``path`` or the ``name`` part of an API path string.

    Any other parse type returns the value unchanged.
    """
    mode = parse_type.lower()
    if mode == "path":
        raw = TYPE_ONLY_RE.sub("", value, count=1)
        return TRAILING_NAME_RE.sub("", raw)
    if mode == "name":
        if TYPE_PATH_RE.search(value):
            return TYPE_PATH_RE.sub("", value)
        root_re = _root_path_re(roots)
        if root_re and root_re.search(value):
            return root_re.sub("", value, count=1)
    return value
