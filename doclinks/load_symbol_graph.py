"""Loading of doclets and tutorials from YAML (or JSON) files."""

from dataclasses import dataclass
from pathlib import Path

import yaml

from doclinks.doclet import Doclet
from doclinks.doclet_store import DocletStore
from doclinks.tutorial import Tutorial, tutorials_from_dict


@dataclass
class SymbolGraph:
    """The doclets and tutorials of one documentation set."""

    store: DocletStore
    tutorials: Tutorial


def load_symbol_graph(path: Path) -> SymbolGraph:
    """Load a symbol graph file.

    The file holds either a list of doclets or a mapping with ``doclets`` and
    an optional ``tutorials`` tree (name -> {title, children}).
    """
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if isinstance(doc, list):
        raw_doclets, raw_tutorials = doc, {}
    elif isinstance(doc, dict):
        raw_doclets = doc.get("doclets") or []
        raw_tutorials = doc.get("tutorials") or {}
    else:
        raise ValueError(f"{path}: expected a list or mapping, got {type(doc).__name__}")

    doclets = [Doclet.from_dict(d) for d in raw_doclets if isinstance(d, dict)]
    return SymbolGraph(store=DocletStore(doclets), tutorials=tutorials_from_dict(raw_tutorials))
