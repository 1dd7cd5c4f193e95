from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence, Tuple


Item = Any
CostFunction = Callable[[Item, Item, int], int]
ItemCompare = Callable[[Item, Item], bool]

NOT_FOUND = -1


class GraphError(RuntimeError):
    """Precondition violation on a word graph."""


class GraphFullError(GraphError):
    pass


class VertexIndexError(GraphError, IndexError):
    pass


@dataclass(frozen=True)
class Edge:
    target: int
    weight: int


@dataclass
class Vertex:
    item: Item
    adjacency: List[Edge] = field(default_factory=list)


class Graph:
    """Fixed-capacity undirected weighted graph, one vertex per item.

    Vertices are addressed by their insertion index. The graph is filled
    with ``insert`` and then wired once by ``build_edges``; afterwards it is
    only read.
    """

    def __init__(self, capacity: int, max_weight: int) -> None:
        if capacity <= 0:
            raise ValueError(f"Graph capacity must be positive, got {capacity}.")
        if max_weight < 0:
            raise ValueError(f"Maximum weight must be non-negative, got {max_weight}.")
        self.capacity = capacity
        self.max_weight = max_weight
        self._vertices: List[Vertex] = []
        self._edge_count = 0
        self._edges_built = False

    def __len__(self) -> int:
        return len(self._vertices)

    @property
    def is_full(self) -> bool:
        return len(self._vertices) == self.capacity

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def insert(self, item: Item) -> int:
        if self.is_full:
            raise GraphFullError(f"Graph is full ({self.capacity} vertices).")
        self._vertices.append(Vertex(item))
        return len(self._vertices) - 1

    def find(self, item: Item, compare: ItemCompare = operator.eq) -> int:
        for index, vertex in enumerate(self._vertices):
            if compare(vertex.item, item):
                return index
        return NOT_FOUND

    def vertex_at(self, index: int) -> Vertex:
        if not 0 <= index < len(self._vertices):
            raise VertexIndexError(
                f"Vertex index {index} outside graph range 0..{len(self._vertices) - 1}."
            )
        return self._vertices[index]

    def item_at(self, index: int) -> Item:
        return self.vertex_at(index).item

    def adjacency_of(self, vertex: Vertex) -> Tuple[Edge, ...]:
        return tuple(vertex.adjacency)

    def neighbors(self, index: int) -> Tuple[Edge, ...]:
        return self.adjacency_of(self.vertex_at(index))

    def add_edge(self, i1: int, i2: int, weight: int) -> None:
        first = self.vertex_at(i1)
        second = self.vertex_at(i2)
        if i1 == i2:
            raise ValueError(f"Self-loop on vertex {i1} is not allowed.")
        if weight < 0:
            raise ValueError(f"Edge {i1}-{i2} has negative weight {weight}.")

        first.adjacency.append(Edge(i2, weight))
        second.adjacency.append(Edge(i1, weight))
        self._edge_count += 1

    def build_edges(self, cost: CostFunction) -> int:
        """Connect every pair of items whose cost stays within ``max_weight``.

        Accepted costs are stored squared, and ``max_weight`` itself is
        squared once the pass is over. This is O(V^2) calls to ``cost`` and
        may only run once per graph.
        """
        if self._edges_built:
            raise GraphError("Edges have already been built for this graph.")

        limit = self.max_weight
        added = 0
        for i in range(len(self._vertices)):
            item_i = self._vertices[i].item
            for j in range(i):
                weight = cost(item_i, self._vertices[j].item, limit)
                if weight <= limit:
                    self.add_edge(i, j, weight * weight)
                    added += 1

        self.max_weight = limit * limit
        self._edges_built = True
        return added

    def edge_weight(self, i1: int, i2: int) -> Optional[int]:
        for edge in self.vertex_at(i1).adjacency:
            if edge.target == i2:
                return edge.weight
        return None

    def path_cost(self, path: Sequence[int]) -> int:
        """Return the total cost of walking along the given vertex sequence."""
        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            edge_cost = self.edge_weight(u, v)
            if edge_cost is None:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += edge_cost
        return total_cost

    def clear(self, release: Optional[Callable[[Item], None]] = None) -> None:
        """Tear the graph down, handing every item to ``release`` first."""
        for vertex in self._vertices:
            if release is not None:
                release(vertex.item)
            vertex.adjacency.clear()
        self._vertices.clear()
        self._edge_count = 0
