from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, TextIO

import yaml

from dictionary import load_graphs
from graph import GraphError
from solver import QueryResult, format_result, max_permutations, parse_queries, solve_queries


logger = logging.getLogger(__name__)

PATH_SUFFIX = ".path"


def load_config(path: Path) -> Dict:
    with path.open("r", encoding="utf-8") as handle:
        config = yaml.safe_load(handle)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Configuration {path} must be a mapping.")
    return config


def resolve_settings(args: argparse.Namespace) -> Dict:
    """Merge the optional YAML config with the command line, CLI first."""
    config = load_config(args.config) if args.config else {}

    def pick(name: str, default=None):
        value = getattr(args, name)
        if value is not None:
            return value
        return config.get(name, default)

    dictionary = pick("dictionary")
    queries = pick("queries")
    if dictionary is None or queries is None:
        raise ValueError("Both a dictionary and a queries file are required.")

    queries = Path(queries)
    output = pick("output") or str(queries.with_suffix(PATH_SUFFIX))
    plot = pick("plot")

    log_level = "DEBUG" if args.verbose else str(config.get("log_level", "WARNING")).upper()

    return {
        "dictionary": Path(dictionary),
        "queries": queries,
        "output": output,
        "plot": Path(plot) if plot else None,
        "log_level": log_level,
    }


def write_results(results: Sequence[QueryResult], handle: TextIO) -> None:
    for result in results:
        handle.write(format_result(result))


def run(settings: Dict) -> List[QueryResult]:
    with settings["queries"].open("r", encoding="utf-8") as handle:
        queries = list(parse_queries(handle))
    logger.info("Read %d queries from %s", len(queries), settings["queries"])

    # Only the word lengths that queries ask for get a graph.
    graphs = load_graphs(settings["dictionary"], max_permutations(queries))
    results = list(solve_queries(graphs, queries))

    output = settings["output"]
    if output == "-":
        write_results(results, sys.stdout)
    else:
        with open(output, "w", encoding="utf-8") as handle:
            write_results(results, handle)
        logger.info("Wrote %d results to %s", len(results), output)

    if settings["plot"] is not None:
        from visualize import draw_path

        answered = next((result for result in results if result.found), None)
        if answered is None:
            logger.warning("Plot requested but no query produced a path.")
        else:
            draw_path(
                graph=graphs[len(answered.query.source)],
                result=answered,
                output=settings["plot"],
                show=False,
            )

    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the cheapest chain of word changes between pairs of words."
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        type=Path,
        help="Dictionary file, whitespace-separated words.",
    )
    parser.add_argument(
        "queries",
        nargs="?",
        type=Path,
        help="Queries file, one 'source target max_permutations' per line.",
    )
    parser.add_argument(
        "-o",
        "--output",
        help=f"Where to write results ('-' for stdout, default: queries with {PATH_SUFFIX}).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file providing any of the settings above.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        help="Save a PNG of the first answered query's word graph and path.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = resolve_settings(args)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run(settings)
    except (OSError, GraphError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
