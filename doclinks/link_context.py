"""State shared by every link resolution call of one generation run."""

import logging
from dataclasses import dataclass, field
from typing import Any

from doclinks.diagnostic import Diagnostic
from doclinks.link_map import LinkMap, TutorialLinkMap
from doclinks.tag_dictionary import TagDictionary
from doclinks.tutorial import Tutorial

logger = logging.getLogger(__name__)


@dataclass
class LinkContext:
    """Owns the filename, fragment and link tables for a single run.

    Identifiers are allocated on first request and never renamed, so every
    lookup for the same longname within a run yields the same target.
    """

    dictionary: TagDictionary = field(default_factory=TagDictionary)
    tutorials: Tutorial = field(default_factory=Tutorial)
    file_extension: str = ".html"
    monospace_links: bool = False
    clever_links: bool = False
    path_roots: list[str] = field(default_factory=lambda: ["esri"])

    # lower-cased filename -> source string
    files: dict[str, str] = field(default_factory=dict)
    # filename -> lower-cased fragment -> fragment
    ids: dict[str, dict[str, str]] = field(default_factory=dict)
    link_map: LinkMap = field(default_factory=LinkMap)
    tutorial_link_map: TutorialLinkMap = field(default_factory=TutorialLinkMap)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @classmethod
    def from_config(
        cls, config: dict[str, Any], tutorials: Tutorial | None = None
    ) -> "LinkContext":
        """Create a context from a loaded configuration mapping."""
        templates = config.get("templates") or {}
        return cls(
            dictionary=TagDictionary(config.get("namespaces")),
            tutorials=tutorials if tutorials is not None else Tutorial(),
            file_extension=config.get("file_extension", ".html"),
            monospace_links=bool(templates.get("monospace_links", False)),
            clever_links=bool(templates.get("clever_links", False)),
            path_roots=list(config.get("path_roots") or []),
        )

    def report(
        self, code: str, message: str, subject: str = "", severity: str = "error"
    ) -> Diagnostic:
        """Record and log a recoverable failure."""
        diagnostic = Diagnostic(code, message, subject, severity)
        self.diagnostics.append(diagnostic)
        if severity == "error":
            logger.error("%s", message)
        else:
            logger.warning("%s", message)
        return diagnostic

    def has_errors(self) -> bool:
        """Check if any error diagnostics were recorded."""
        return any(d.severity == "error" for d in self.diagnostics)

    def reset(self) -> None:
        """Clear every table so the context can serve a new run."""
        self.files.clear()
        self.ids.clear()
        self.link_map.clear()
        self.tutorial_link_map.clear()
        self.diagnostics.clear()
