from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from dictionary import load_graphs
from graph import Graph
from solver import Query, QueryResult, solve_query


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    for index in range(len(graph)):
        g.add_node(graph.item_at(index))
    for index in range(len(graph)):
        for edge in graph.neighbors(index):
            if edge.target < index:
                g.add_edge(graph.item_at(index), graph.item_at(edge.target), cost=edge.weight)
    return g


def compute_layout(graph: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def draw_path(
    graph: Graph,
    result: QueryResult,
    output: Optional[Path],
    show: bool,
) -> None:
    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    path_edges = route_edges(result.path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=2.5,
            ax=ax,
        )

    on_path = set(result.path)
    node_colors = ["#d62728" if node in on_path else "#9ecae1" for node in graph_nx.nodes]
    nx.draw_networkx_nodes(graph_nx, layout, node_color=node_colors, node_size=600, ax=ax)
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    edge_labels = {(u, v): data["cost"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax)

    query = result.query
    summary_lines = [
        f"{query.source} -> {query.target}",
        f"Cost: {result.cost}" if result.found else "Cost: no path",
        f"Words on path: {len(result.path)}",
        f"Graph: {graph_nx.number_of_nodes()} words, {graph_nx.number_of_edges()} edges",
    ]
    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Word graph, length {len(query.source)}")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Draw the word graph and cheapest path for one pair of words."
    )
    parser.add_argument("dictionary", type=Path, help="Dictionary file.")
    parser.add_argument("source", help="Starting word.")
    parser.add_argument("target", help="Word to reach.")
    parser.add_argument("max_permutations", type=int, help="Maximum changes per step.")
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and path.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    query = Query(args.source, args.target, args.max_permutations)
    graphs = load_graphs(args.dictionary, {len(args.source): args.max_permutations})
    graph = graphs.get(len(args.source))
    if graph is None:
        raise SystemExit(f"No dictionary words of length {len(args.source)}.")

    draw_path(
        graph=graph,
        result=solve_query(graphs, query),
        output=args.static_out,
        show=not args.no_show,
    )


if __name__ == "__main__":
    main()
