"""Command-line interface for graphtheory."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import defaultdict
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, NoReturn, Optional

import yaml

from graphtheory.analysis import AnalysisRegistry, get_default_registry
from graphtheory.config import ANALYSIS_CONFIG
from graphtheory.graph.io import load_graph_file
from graphtheory.graph.snapshot import GraphSnapshot
from graphtheory.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _format_analyses(registry: AnalysisRegistry) -> str:
    """Return the available analyses as a help epilog table."""
    rows = []
    for name in registry.names():
        spec = registry.get(name)
        note = " (needs --start and --end)" if spec.needs_endpoints else ""
        rows.append([name, spec.description + note])
    return "available analyses:\n" + _format_table(["Analysis", "Description"], rows)


def _load(
    path: Path, directed: Optional[bool], weighted: Optional[bool]
) -> GraphSnapshot:
    snapshot = load_graph_file(path, directed=directed, weighted=weighted)
    logger.info(
        f"Loaded {path}: {len(snapshot.nodes)} {_plural(len(snapshot.nodes), 'node')}, "
        f"{len(snapshot.edges)} {_plural(len(snapshot.edges), 'edge')}"
    )
    return snapshot


def _fail(message: str) -> NoReturn:
    logger.error(message)
    print(f"❌ ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def _run_analyses(
    path: Path,
    directed: Optional[bool],
    weighted: Optional[bool],
    analyses: Optional[List[str]],
    start: Optional[str],
    end: Optional[str],
    output: Optional[Path],
) -> None:
    """Load a graph, run analyses and emit their results as JSON."""
    _start_time = perf_counter()
    try:
        snapshot = _load(path, directed, weighted)
        results = get_default_registry().run(snapshot, analyses, start=start, end=end)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        _fail(f"Failed to analyze graph: {type(e).__name__}: {e}")

    payload: Dict[str, Any] = {
        "graph": {
            "directed": snapshot.is_directed,
            "weighted": snapshot.is_weighted,
            "nodes": len(snapshot.node_ids()),
            "edges": len(snapshot.edges),
        },
        "results": {name: result.to_dict() for name, result in results.items()},
    }
    json_str = json.dumps(payload, indent=2, default=str)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json_str + "\n", encoding="utf-8")
        logger.info(f"Results written to {output}")
    else:
        print(json_str)

    logger.info(
        f"Ran {len(results)} {_plural(len(results), 'analysis', 'analyses')} "
        f"in {_format_duration(perf_counter() - _start_time)}"
    )


def _inspect_graph(
    path: Path, directed: Optional[bool], weighted: Optional[bool]
) -> None:
    """Print a structural overview of a graph file and validate it."""
    try:
        snapshot = _load(path, directed, weighted)
    except FileNotFoundError:
        _fail(f"Graph file not found: {path}")
    except (OSError, ValueError, yaml.YAMLError) as e:
        _fail(f"Failed to load graph: {type(e).__name__}: {e}")

    self_loops = [edge.id for edge in snapshot.edges if edge.is_self_loop]
    pairs: Dict[Any, List[Any]] = defaultdict(list)
    for edge in snapshot.edges:
        key = (
            (edge.source, edge.target)
            if snapshot.is_directed
            else tuple(sorted((edge.source, edge.target)))
        )
        pairs[key].append(edge.id)
    parallel = {pair: ids for pair, ids in pairs.items() if len(ids) > 1}
    implicit = snapshot.implicit_node_ids()

    print("GRAPH OVERVIEW")
    print("=" * 60)
    rows = [
        ["Directed", str(snapshot.is_directed)],
        ["Weighted", str(snapshot.is_weighted)],
        ["Declared nodes", str(len(snapshot.declared_node_ids()))],
        ["Implicit nodes", str(len(implicit))],
        ["Edges", str(len(snapshot.edges))],
        ["Self-loops", str(len(self_loops))],
        ["Parallel groups", str(len(parallel))],
    ]
    print(_format_table(["Property", "Value"], rows))

    if parallel:
        print("\nParallel edges:")
        print(
            _format_table(
                ["Endpoints", "Edge ids"],
                [
                    ["-".join(pair), ", ".join(map(str, ids))]
                    for pair, ids in parallel.items()
                ],
            )
        )
    if self_loops:
        print(f"\nSelf-loops: {', '.join(map(str, self_loops))}")
    if implicit:
        print(f"\nImplicit nodes: {', '.join(map(str, implicit))}")

    try:
        snapshot.validate()
    except ValueError as e:
        _fail(str(e))
    print("\n✅ Graph is valid")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``graphtheory`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    registry = get_default_registry()
    parser = argparse.ArgumentParser(
        prog="graphtheory",
        description="Compute structural properties of small graphs.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Run analyses on a graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_format_analyses(registry),
    )
    run_parser.add_argument(
        "--analysis",
        "-a",
        nargs="+",
        choices=registry.names(),
        default=None,
        help="Analyses to run, listed below (default: all that apply)",
    )
    run_parser.add_argument("--start", "-s", default=None, help="Start node id")
    run_parser.add_argument("--end", "-e", default=None, help="End node id")
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write JSON results to this file instead of stdout",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a graph file"
    )

    for p in (run_parser, inspect_parser):
        p.add_argument(
            "graph",
            type=Path,
            help="Graph file: text edge list, or node-link .json/.yaml",
        )
        p.add_argument(
            "--directed",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Treat edges as one-way (default: from file, else undirected)",
        )
        p.add_argument(
            "--weighted",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Use edge weights (default: from file, else unweighted)",
        )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(ANALYSIS_CONFIG.default_log_level)

    if args.command == "run":
        _run_analyses(
            path=args.graph,
            directed=args.directed,
            weighted=args.weighted,
            analyses=args.analysis,
            start=args.start,
            end=args.end,
            output=args.output,
        )
    elif args.command == "inspect":
        _inspect_graph(args.graph, args.directed, args.weighted)


if __name__ == "__main__":
    main()
