#!/usr/bin/env python3
"""Render a citation from a YAML or JSON file of catalog fields."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from citekit.core.config import load_config
from citekit.core.errors import CitationError
from citekit.styles import list_styles, render, render_all

logger = logging.getLogger("render_citation")


# ── Input ────────────────────────────────────────────────────────────


def load_fields(path: str) -> dict[str, list[str]]:
    """Read field -> value(s) from YAML (JSON is valid YAML).

    Scalars become one-element lists; numbers such as a bare year are
    converted to strings.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise CitationError(f"{path}: expected a mapping of field -> values")

    fields = {}
    for key, value in data.items():
        if value is None:
            continue
        values = value if isinstance(value, list) else [value]
        fields[str(key)] = [str(v) for v in values if v is not None]
    return fields


# ── CLI ──────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Format a catalog record as a citation")
    parser.add_argument("fields", help="Path to a YAML/JSON file of catalog fields")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--style",
        default="apa",
        choices=list_styles(),
        help="Citation style (default: apa)",
    )
    group.add_argument(
        "--all",
        action="store_true",
        help="Render MLA, APA, Chicago and Bluebook as a JSON list",
    )
    parser.add_argument("--config", default=None, help="Path to a service config YAML")
    parser.add_argument("--record-url", default=None, help="Catalog URL of the record (RIS)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = load_config(args.config) if args.config else None
        fields = load_fields(args.fields)

        if args.all:
            results = render_all(fields, config=config)
            payload = [{"label": r.label, "value": r.body} for r in results]
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            return 0

        result = render(args.style, fields, config=config, record_url=args.record_url)
    except CitationError as e:
        logger.error("%s (%s)", e, e.status.phrase)
        return 1

    if result.filename:
        logger.info("Suggested filename: %s", result.filename)
    sys.stdout.write(result.body)
    if not result.body.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
