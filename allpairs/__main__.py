"""Command-line entry point.

Examples::

    python -m allpairs data/sample.graph
    python -m allpairs data/sample.graph --source 1 --target 3
    python -m allpairs data/sample.graph --output report.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .adapters.rendering import format_path_line
from .config import AppConfig, get_config
from .container import Container
from .domain.errors import AllPairsError, ConfigurationError
from .services import AllPairsService


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> AppConfig:
    """Load the application configuration.

    Raises:
        ConfigurationError: If an APSP_* environment variable is invalid.
    """
    try:
        return get_config()
    except ValidationError as e:
        error = e.errors()[0]
        setting = ".".join(str(part) for part in error["loc"])
        raise ConfigurationError(
            f"Invalid configuration for {setting}: {error['msg']}",
            setting_name=setting,
            cause=e,
        )


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="allpairs",
        description="All-pairs shortest paths (Floyd-Warshall) on an edge-list graph.",
    )
    parser.add_argument(
        "graph",
        nargs="?",
        type=Path,
        help="Edge-list file (defaults to the configured graph file)",
    )
    parser.add_argument("--source", help="Source node label for a single query")
    parser.add_argument("--target", help="Target node label for a single query")
    parser.add_argument("--output", type=Path, help="Also write the report to this file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: APSP_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    if (args.source is None) != (args.target is None):
        parser.error("--source and --target must be given together")

    try:
        config = load_config()
        logging.basicConfig(
            level=args.log_level or config.observability.level,
            format=config.observability.format,
        )

        container = Container.create_default(config, graph_path=args.graph)
        service: AllPairsService = container.resolve(AllPairsService)

        if args.source is not None:
            query = service.query(args.source, args.target)
            print(format_path_line(query))
            if query:
                print(f"Total distance: {query.distance}")
        else:
            print(service.report(args.output), end="")
    except AllPairsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
