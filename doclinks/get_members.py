"""Logic for grouping doclets into the sections of the documentation index."""

import re
from dataclasses import dataclass, field, replace

from doclinks.create_link import is_module_exports
from doclinks.doclet import Doclet
from doclinks.doclet_store import UNDEFINED, DocletStore

GLOBAL_KINDS = ["member", "function", "constant", "typedef"]
QUOTES_RE = re.compile(r'(^"|"$)')


@dataclass
class Members:
    """Doclets grouped by the index section they belong to."""

    classes: list[Doclet] = field(default_factory=list)
    externals: list[Doclet] = field(default_factory=list)
    events: list[Doclet] = field(default_factory=list)
    globals: list[Doclet] = field(default_factory=list)
    mixins: list[Doclet] = field(default_factory=list)
    modules: list[Doclet] = field(default_factory=list)
    namespaces: list[Doclet] = field(default_factory=list)
    interfaces: list[Doclet] = field(default_factory=list)


def get_members(store: DocletStore) -> Members:
    """Collect classes, externals, events, globals, mixins, modules, namespaces and interfaces."""
    globals_ = [
        d
        for d in store.find(kind=GLOBAL_KINDS, memberof=UNDEFINED)
        # module.exports = function() {} is a module, not a global
        if not is_module_exports(d)
    ]
    # externals may use quoted names such as `@external "jquery.fn"`
    externals = [
        replace(d, name=QUOTES_RE.sub("", d.name)) if d.name else d
        for d in store.find(kind="external")
    ]
    return Members(
        classes=store.find(kind="class"),
        externals=externals,
        events=store.find(kind="event"),
        globals=globals_,
        mixins=store.find(kind="mixin"),
        modules=store.find(kind="module"),
        namespaces=store.find(kind="namespace"),
        interfaces=store.find(kind="interface"),
    )
