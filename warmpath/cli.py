"""
Command-line driver for the connection-strategy engine.

Loads a graph document, looks up source and target profiles by id, and
prints the recommended strategy as JSON.

Usage:
    # Best strategy for one target
    warmpath-find graph.json --source alice --target dana

    # All viable strategies, highest confidence first
    warmpath-find graph.json --source alice --target dana --compare

    # Several targets at once (only confident matches are printed)
    warmpath-find graph.json --source alice --target dana --target erin
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from warmpath.common.config import Config
from warmpath.common.error_handling import WarmpathError
from warmpath.common.logger import set_global_debug_mode, setup_logging
from warmpath.pathfinder.batch import batch_discover_connections, compare_strategies
from warmpath.pathfinder.engine import find_connection_strategy
from warmpath.pathfinder.memory_graph import DEFAULT_MAX_HOPS, InMemoryGraph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="warmpath-find",
        description="Recommend how to reach a person in a professional graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    warmpath-find graph.json --source alice --target dana
    warmpath-find graph.json --source alice --target dana --compare
    warmpath-find graph.json --source alice --target dana --target erin
        """,
    )
    parser.add_argument("graph", help="Path to a graph JSON document (profiles + connections)")
    parser.add_argument("--source", required=True, help="Id (or email / name) of your profile")
    parser.add_argument(
        "--target",
        required=True,
        action="append",
        help="Id of the person to reach (repeat for batch discovery)",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Print every viable strategy instead of only the recommended one",
    )
    parser.add_argument(
        "--max-hops",
        type=int,
        default=DEFAULT_MAX_HOPS,
        metavar="N",
        help=f"Maximum path length for mutual connection search (default: {DEFAULT_MAX_HOPS})",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging")
    return parser


async def run(args: argparse.Namespace) -> object:
    """Execute the lookup described by parsed arguments; returns JSON-ready data."""
    graph = InMemoryGraph.from_json_file(args.graph, max_hops=args.max_hops)

    source = graph.get_node(args.source)
    if source is None:
        raise WarmpathError(f"Source profile not found in graph: {args.source}")

    targets = []
    for target_id in args.target:
        target = graph.get_node(target_id)
        if target is None:
            raise WarmpathError(f"Target profile not found in graph: {target_id}")
        targets.append(target)

    if len(targets) > 1:
        if args.compare:
            raise WarmpathError("--compare takes a single --target")
        strategies = await batch_discover_connections(source, targets, graph)
        return [strategy.to_dict() for strategy in strategies]

    if args.compare:
        strategies = await compare_strategies(source, targets[0], graph)
        return [strategy.to_dict() for strategy in strategies]

    strategy = await find_connection_strategy(source, targets[0], graph)
    return strategy.to_dict()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug:
        set_global_debug_mode(True)
    setup_logging(level="DEBUG" if args.debug else Config.LOG_LEVEL, format=Config.LOG_FORMAT)

    try:
        Config.validate()
        result = asyncio.run(run(args))
    except (WarmpathError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
