"""
Command Line Interface
=====================

Render a compat data file to an HTML table fragment from build scripts.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from compat_table.config.logging import get_logger
from compat_table.config.settings import get_settings
from compat_table.core.compat.document import CompatDocumentError, load_compat_file
from compat_table.core.rendering.table_generator import (
    CompatTableGenerator,
    TableGenerationError,
)
from compat_table.models.schemas import RenderContext

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compat-table", description="Render compat data as an HTML compatibility table"
    )
    parser.add_argument("path", type=Path, help="JSON or YAML compat data file")
    parser.add_argument(
        "--base-url", help="Locale-agnostic documentation path, required for aggregate tables"
    )
    parser.add_argument("--locale", help="Locale used in generated links (default from settings)")
    parser.add_argument("--output", "-o", type=Path, help="Write HTML to this file instead of stdout")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the compat table renderer."""
    args = build_parser().parse_args(argv)

    context = RenderContext.from_settings(get_settings())
    if args.locale:
        context = context.model_copy(update={"locale": args.locale})

    try:
        document = load_compat_file(args.path)
        html = CompatTableGenerator(context).generate(document, args.base_url)
    except (CompatDocumentError, TableGenerationError) as e:
        print(f"compat-table: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(html + "\n", encoding="utf-8")
        logger.info("Compat table written", output=str(args.output))
    else:
        sys.stdout.write(html + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
