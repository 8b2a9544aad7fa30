"""Logic for writing the resolved link tables of a run to JSON."""

import hashlib
import json
import time
from pathlib import Path
from typing import Any

from doclinks.link_context import LinkContext


def compute_config_hash(config: dict[str, Any]) -> str:
    """Fingerprint the settings a link report was produced with.

    Equal settings give equal hashes whatever the key order, so two reports
    can be compared before their link tables are.
    """
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class LinkReport:
    """Summarizes the links, fragments and diagnostics of one run."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report with the run's configuration."""
        self.config_hash = compute_config_hash(config)
        self.start_time = time.time()
        self.urls: dict[str, str] = {}
        self.descriptions: dict[str, str] = {}

    def add_link(self, longname: str, url: str) -> None:
        """Record the URL created for a doclet."""
        self.urls[longname] = url

    def add_description(self, longname: str, html: str) -> None:
        """Record a doclet description with its inline tags resolved."""
        self.descriptions[longname] = html

    def build(self, ctx: LinkContext) -> dict[str, Any]:
        """Assemble the report contents."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_links": len(self.urls),
            },
            "links": self.urls,
            "descriptions": self.descriptions,
            "files": dict(ctx.link_map.longname_to_url),
            "fragments": dict(ctx.link_map.longname_to_id),
            "tutorials": dict(ctx.tutorial_link_map.name_to_url),
            "diagnostics": [
                {
                    "severity": d.severity,
                    "code": d.code,
                    "message": d.message,
                    "subject": d.subject,
                }
                for d in ctx.diagnostics
            ],
            "stats": self._compute_stats(ctx),
        }

    def write(self, ctx: LinkContext, path: Path) -> None:
        """Write the report to a JSON file."""
        path.write_text(json.dumps(self.build(ctx), indent=2), encoding="utf-8")

    def _compute_stats(self, ctx: LinkContext) -> dict[str, Any]:
        code_counts: dict[str, int] = {}
        for d in ctx.diagnostics:
            code_counts[d.code] = code_counts.get(d.code, 0) + 1
        return {
            "files": len(ctx.files),
            "fragments": sum(len(v) for v in ctx.ids.values()),
            "diagnostic_counts": code_counts,
        }
