from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from graph import NOT_FOUND, Graph, GraphError
from paths import ShortestPathTree, shortest_path
from words import same_word


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
    source: str
    target: str
    max_permutations: int


@dataclass
class QueryResult:
    query: Query
    cost: Optional[int] = None
    path: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.cost is not None


def parse_queries(lines: Iterable[str]) -> Iterator[Query]:
    """Yield one query per ``source target max_permutations`` line.

    Blank lines are ignored; malformed lines are logged and skipped.
    """
    for number, line in enumerate(lines, start=1):
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 3:
            logger.warning("Skipping query line %d: expected 3 fields, got %d", number, len(fields))
            continue
        source, target, bound = fields
        try:
            limit = int(bound)
        except ValueError:
            logger.warning("Skipping query line %d: %r is not an integer", number, bound)
            continue
        if limit < 0:
            logger.warning("Skipping query line %d: negative bound %d", number, limit)
            continue
        yield Query(source, target, limit)


def max_permutations(queries: Iterable[Query]) -> Dict[int, int]:
    limits: Dict[int, int] = {}
    for query in queries:
        length = len(query.source)
        limits[length] = max(limits.get(length, 0), query.max_permutations)
    return limits


class QuerySolver:
    """Answer queries against prebuilt graphs, reusing trees per source."""

    def __init__(self, graphs: Dict[int, Graph]) -> None:
        self.graphs = graphs
        self._trees: Dict[Tuple[int, int], ShortestPathTree] = {}

    def tree_for(self, length: int, source: int) -> ShortestPathTree:
        key = (length, source)
        tree = self._trees.get(key)
        if tree is None:
            tree = shortest_path(self.graphs[length], source)
            self._trees[key] = tree
        return tree

    def solve(self, query: Query) -> QueryResult:
        result = QueryResult(query)
        length = len(query.source)
        if len(query.target) != length:
            logger.debug("No path %s -> %s: lengths differ", query.source, query.target)
            return result

        graph = self.graphs.get(length)
        if graph is None:
            logger.debug("No graph for words of length %d", length)
            return result

        source = graph.find(query.source, same_word)
        target = graph.find(query.target, same_word)
        if source == NOT_FOUND or target == NOT_FOUND:
            logger.debug("No path %s -> %s: word not in dictionary", query.source, query.target)
            return result

        try:
            tree = self.tree_for(length, source)
            indices = tree.path_to(target)
            if indices is None:
                return result
            result.cost = int(tree.distance_to(target))
            result.path = [graph.item_at(index) for index in indices]
        except GraphError as exc:
            logger.error("Query %s -> %s failed: %s", query.source, query.target, exc)
            result.cost = None
            result.path = []
        return result


def solve_query(graphs: Dict[int, Graph], query: Query) -> QueryResult:
    return QuerySolver(graphs).solve(query)


def solve_queries(graphs: Dict[int, Graph], queries: Iterable[Query]) -> Iterator[QueryResult]:
    solver = QuerySolver(graphs)
    for query in queries:
        yield solver.solve(query)


def format_result(result: QueryResult) -> str:
    query = result.query
    if not result.found:
        return f"{query.source} -1\n{query.target}\n"

    lines = [f"{result.path[0]} {result.cost}"]
    # A word reached from itself still ends with its own line.
    lines.extend(result.path[1:] or result.path)
    return "\n".join(lines) + "\n"
