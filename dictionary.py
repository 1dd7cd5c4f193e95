from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, TextIO

from graph import CostFunction, Graph
from words import permutation_distance


logger = logging.getLogger(__name__)


def read_words(handle: TextIO) -> Iterator[str]:
    for line in handle:
        yield from line.split()


def build_graphs(
    words: Iterable[str],
    max_permutations: Dict[int, int],
    cost: CostFunction = permutation_distance,
) -> Dict[int, Graph]:
    """Build one word graph per length requested in ``max_permutations``.

    Words of other lengths are ignored and repeated words are kept once.
    Each graph's weight ceiling is the largest bound asked for that length.
    """
    buckets: Dict[int, Dict[str, None]] = {length: {} for length in max_permutations}
    for word in words:
        bucket = buckets.get(len(word))
        if bucket is not None:
            bucket.setdefault(word, None)

    graphs: Dict[int, Graph] = {}
    for length, bucket in sorted(buckets.items()):
        if not bucket:
            logger.info("No dictionary words of length %d", length)
            continue

        entries: List[str] = list(bucket)
        graph = Graph(len(entries), max_permutations[length])
        for word in entries:
            graph.insert(word)
        edges = graph.build_edges(cost)
        logger.info(
            "Built graph for length %d: %d words, %d edges, max weight %d",
            length,
            len(graph),
            edges,
            graph.max_weight,
        )
        graphs[length] = graph

    return graphs


def load_graphs(
    path: Path,
    max_permutations: Dict[int, int],
    cost: CostFunction = permutation_distance,
) -> Dict[int, Graph]:
    with path.open("r", encoding="utf-8") as handle:
        return build_graphs(read_words(handle), max_permutations, cost)
