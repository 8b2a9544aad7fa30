"""Orchestration logic for resolving every link of a symbol graph."""

import argparse
import json
import logging

import yaml

from doclinks.add_event_listeners import add_event_listeners
from doclinks.create_link import get_link_target
from doclinks.encode_uri import encode_uri
from doclinks.inline_tags import resolve_links
from doclinks.link_context import LinkContext
from doclinks.link_report import LinkReport
from doclinks.load_config import load_config
from doclinks.load_symbol_graph import load_symbol_graph
from doclinks.prune import prune

logger = logging.getLogger(__name__)


def run_resolution(args: argparse.Namespace) -> int:
    """Execute the full link resolution pass."""
    config = load_config(args.config)
    try:
        graph = load_symbol_graph(args.symbols)
    except (OSError, yaml.YAMLError, ValueError) as e:
        msg = f"Unable to load symbol graph {args.symbols}: {e}"
        raise SystemExit(msg) from e

    ctx = LinkContext.from_config(config, graph.tutorials)
    store = prune(graph.store, config.get("access"), bool(config.get("private")))
    add_event_listeners(store)

    report = LinkReport(config)
    # every URL is allocated before any text is resolved, so the first
    # registration for a longname always comes from its own doclet
    for doclet in store:
        target = get_link_target(ctx, doclet)
        ctx.link_map.register_link(doclet.longname, target)
        report.add_link(doclet.longname, encode_uri(target))

    if args.resolve_descriptions:
        for doclet in store:
            if doclet.description:
                report.add_description(doclet.longname, resolve_links(ctx, doclet.description))

    if args.output:
        report.write(ctx, args.output)
        logger.info("Wrote %d links to %s", len(report.urls), args.output)
    else:
        print(json.dumps(report.build(ctx), indent=2))

    logger.info(
        "Resolved %d links with %d diagnostics", len(report.urls), len(ctx.diagnostics)
    )
    if args.strict and ctx.has_errors():
        return 1
    return 0
