#!/usr/bin/env python3
"""
box-inspect - classify the boxes of an HTML document from the command line.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import requests

from box_engine import __version__
from box_engine.classifier import BoxInspector, UnknownPredicateError, get_predicate
from box_engine.dom import Document, Element
from box_engine.utils.config import Config
from box_engine.utils.logging import setup_logging, log_exception

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="box-inspect",
        description="Classify the layout boxes of an HTML document")

    parser.add_argument("source", help="Path or http(s) URL of the HTML document")
    parser.add_argument("--tag", action="append", default=[],
                        help="Only report elements of this kind (repeatable)")
    parser.add_argument("--predicate", action="append", default=[],
                        help="Only evaluate this predicate (repeatable, snake_case or camelCase)")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--config", help="Path to a JSON configuration file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"box-inspect {__version__}")

    return parser.parse_args(argv)


def load_source(source: str, config: Config) -> str:
    """
    Read the HTML document from a file or URL.

    Raises:
        OSError: If a local file cannot be read
        requests.RequestException: If a URL cannot be fetched
    """
    if source.startswith(("http://", "https://")):
        logger.info(f"Fetching {source}")
        response = requests.get(
            source,
            timeout=config.get("network.timeout", 30),
            headers={"User-Agent": config.get("network.user_agent", "box-inspector")},
        )
        response.raise_for_status()
        return response.text

    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def describe(element: Element) -> str:
    """Short label for an element: kind, then #id when it has one."""
    label = element.local_name
    if element.id:
        label += f"#{element.id}"
    return label


def inspect_document(document: Document, inspector: BoxInspector,
                     tags: List[str], names: Optional[List[str]]) -> List[dict]:
    """Classify the elements of the document body in document order."""
    body = document.body
    if body is None:
        return []

    results = []
    for element in [body] + body.get_elements_by_tag_name("*"):
        if tags and element.local_name not in tags:
            continue
        results.append({
            "element": describe(element),
            "predicates": inspector.matching(element, names),
        })
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for box-inspect."""
    args = parse_args(argv)
    config = Config(args.config)

    setup_logging(config, debug=args.debug)

    names = None
    if args.predicate:
        try:
            for name in args.predicate:
                get_predicate(name)
        except UnknownPredicateError as e:
            print(f"box-inspect: {e}", file=sys.stderr)
            return 2
        names = args.predicate

    try:
        html = load_source(args.source, config)
    except (OSError, requests.RequestException) as e:
        log_exception(logger, e, f"Could not load {args.source}")
        return 1

    document = Document()
    if not document.parse_html(html, base_url=args.source):
        for error in document.get_errors():
            print(f"box-inspect: {error}", file=sys.stderr)
        return 1

    inspector = BoxInspector.from_config(config)
    results = inspect_document(document, inspector, args.tag, names)

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        for entry in results:
            print(f"{entry['element']}: {', '.join(entry['predicates']) or '-'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
