"""Command-line entry point.

Loads every graph from a file, computes its all-pairs shortest-path
table and prints it, or prints a single detailed path:

    pathtable data/graph.txt
    pathtable data/graph.txt --source 1 --destination 3
    pathtable data/vertices.csv --edges data/edges.csv --selection heap
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import PathTableError, VertexOutOfRangeError
from .monitoring import configure_logging
from .services import PathTableService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathtable",
        description="All-pairs shortest paths over a directed, weighted graph",
    )
    parser.add_argument(
        "graph_file",
        nargs="?",
        help="Text-format graph file, or vertices CSV when --edges is given "
        "(default: the configured graph file)",
    )
    parser.add_argument("--edges", help="Edges CSV file; switches to CSV input")
    parser.add_argument("--source", type=int, help="Source vertex of a single path")
    parser.add_argument(
        "--destination", type=int, help="Destination vertex of a single path"
    )
    parser.add_argument(
        "--selection",
        choices=["scan", "heap"],
        help="How the next vertex to settle is chosen",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject invalid edges and labels instead of skipping them",
    )
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser


def _apply_arguments(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    graph_updates: dict = {}
    if args.edges:
        graph_updates.update(
            source_format="csv",
            data_dir=Path.cwd(),
            edges_file=args.edges,
        )
        if args.graph_file:
            graph_updates["vertices_file"] = args.graph_file
    elif args.graph_file:
        graph_updates.update(
            source_format="text",
            data_dir=Path.cwd(),
            graph_file=args.graph_file,
        )
    if args.strict:
        graph_updates["strict_ingestion"] = True

    engine_updates: dict = {}
    if args.selection:
        engine_updates["selection"] = args.selection

    observability_updates: dict = {}
    if args.log_level:
        observability_updates["level"] = args.log_level

    return config.model_copy(
        update={
            "graph": config.graph.model_copy(update=graph_updates),
            "engine": config.engine.model_copy(update=engine_updates),
            "observability": config.observability.model_copy(
                update=observability_updates
            ),
        }
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.source is None) != (args.destination is None):
        parser.error("--source and --destination must be given together")

    config = _apply_arguments(get_config(), args)
    configure_logging(config.observability)

    service: PathTableService = Container.create_default(config).resolve(
        PathTableService
    )

    try:
        graphs = service.load_graphs()
        outputs: List[str] = []
        for number, graph in enumerate(graphs, start=1):
            engine = service.build_engine(graph)
            if args.source is None:
                outputs.append(service.describe_table(engine))
                continue
            try:
                outputs.append(
                    service.describe_path(engine, args.source, args.destination)
                )
            except VertexOutOfRangeError as e:
                logger.info("Skipping graph", extra={"graph": number, "error": str(e)})
                print(f"graph {number}: {e}", file=sys.stderr)
    except PathTableError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("\n".join(outputs), end="")
    return 0 if outputs or not graphs else 1


if __name__ == "__main__":
    sys.exit(main())
