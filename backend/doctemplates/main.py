"""
DocTemplates CLI

Builds the service contract once, clones it per client, derives the
consulting contract and prints the result.

  doctemplates              : default clone count from DOCTEMPLATES_CLONE_COUNT
  doctemplates --clones 10  : ten client copies
  doctemplates --all        : also print every client copy
"""

from __future__ import annotations

import argparse
import sys

from doctemplates.core.config import settings
from doctemplates.errors import DocTemplateError
from doctemplates.render.display import render_template
from doctemplates.templates.factory import build_base_template
from doctemplates.templates.variants import clone_many, create_consulting_contract
from doctemplates.utils.logging import logger, step_timer


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="doctemplates",
        description="Clone document templates from a prebuilt prototype.",
    )
    parser.add_argument(
        "--clones",
        type=int,
        default=settings.clone_count,
        help="Number of client copies to clone from the base template",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Print every client copy, not just the consulting contract",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        with step_timer("Build base template"):
            contract = build_base_template()

        with step_timer(f"Clone {args.clones} client contracts"):
            clients = clone_many(contract, args.clones)

        with step_timer("Derive consulting contract"):
            consulting = create_consulting_contract(contract)

    except (DocTemplateError, ValueError) as exc:
        logger.error("Template run failed: %s", exc)
        return 1

    if args.all:
        for client in clients:
            print(render_template(client))
            print()

    print(render_template(consulting))
    return 0


if __name__ == "__main__":
    sys.exit(main())
