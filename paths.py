from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from graph import Graph
from heap import IndexedHeap


INFINITY = float("inf")
NO_PREDECESSOR = -1


@dataclass(frozen=True)
class ShortestPathTree:
    source: int
    distances: List[float]
    predecessors: List[int]

    def reaches(self, index: int) -> bool:
        return self.distances[index] != INFINITY

    def distance_to(self, index: int) -> float:
        return self.distances[index]

    def path_to(self, index: int) -> Optional[List[int]]:
        return reconstruct_path(self.predecessors, index, self.source)


def shortest_path(graph: Graph, source: int) -> ShortestPathTree:
    """Compute single-source shortest paths using Dijkstra.

    distances[v] stores the cheapest known cost from source to v and
    predecessors[v] the previous vertex on that path. Every vertex is queued
    up front; vertices still at INFINITY when extracted are unreachable and
    are not relaxed. Ties on distance leave the queue by lower index first.
    """
    graph.vertex_at(source)

    size = len(graph)
    distances: List[float] = [INFINITY] * size
    predecessors: List[int] = [NO_PREDECESSOR] * size

    def less(a: int, b: int) -> bool:
        return (distances[a], a) < (distances[b], b)

    queue = IndexedHeap(size, less)
    for v in range(size):
        queue.insert(v)

    distances[source] = 0
    queue.fixup(source)

    while not queue.is_empty():
        v = queue.extract()
        distance_v = distances[v]
        if distance_v == INFINITY:
            continue

        for edge in graph.adjacency_of(graph.vertex_at(v)):
            candidate = distance_v + edge.weight
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                predecessors[edge.target] = v
                queue.fixup(edge.target)

    return ShortestPathTree(source, distances, predecessors)


def reconstruct_path(
    predecessors: Sequence[int], destination: int, source: int
) -> Optional[List[int]]:
    """Walk the predecessor chain back from destination to source.

    Returns the vertices in source-to-destination order, ``[source]`` when
    both are the same vertex, or None when the chain stops before reaching
    the source.
    """
    if destination == source:
        return [source]

    path: List[int] = [destination]
    current = destination
    while current != source:
        current = predecessors[current]
        if current == NO_PREDECESSOR:
            return None
        if len(path) >= len(predecessors):
            raise ValueError("Predecessor list contains a cycle.")
        path.append(current)

    path.reverse()
    return path
