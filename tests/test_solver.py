import logging

import pytest

from dictionary import load_graphs
from graph import Graph, GraphError
from solver import (
    Query,
    QueryResult,
    QuerySolver,
    format_result,
    max_permutations,
    parse_queries,
    solve_queries,
    solve_query,
)


@pytest.fixture
def graphs(dictionary_file):
    return load_graphs(dictionary_file, {3: 1})


def test_parse_queries_skips_blank_and_malformed_lines(caplog):
    lines = ["cat dog 1\n", "\n", "bad line\n", "cat dog x\n", "cat dog -1\n", "ab cd 0"]

    with caplog.at_level(logging.WARNING, logger="solver"):
        queries = list(parse_queries(lines))

    assert queries == [Query("cat", "dog", 1), Query("ab", "cd", 0)]
    assert len(caplog.records) == 3


def test_max_permutations_per_source_length():
    queries = [Query("cat", "dog", 1), Query("cat", "cog", 2), Query("ab", "cd", 0)]

    assert max_permutations(queries) == {3: 2, 2: 0}


def test_solve_query_finds_chain(graphs):
    result = solve_query(graphs, Query("cat", "dog", 1))

    assert result.found
    assert result.cost == 3
    assert result.path == ["cat", "cot", "cog", "dog"]


def test_squared_weights_favour_single_changes(dictionary_file):
    graphs = load_graphs(dictionary_file, {3: 2})

    result = solve_query(graphs, Query("cat", "dog", 2))

    # cat -> cog costs 2 * 2 directly, more than cat -> cot -> cog.
    assert result.cost == 3
    assert result.path == ["cat", "cot", "cog", "dog"]


def test_solve_query_same_word(graphs):
    result = solve_query(graphs, Query("cog", "cog", 1))

    assert result.cost == 0
    assert result.path == ["cog"]


@pytest.mark.parametrize(
    "query",
    [
        Query("cat", "ape", 1),
        Query("cat", "zzz", 1),
        Query("zzz", "cat", 1),
        Query("cat", "dogs", 1),
        Query("ab", "cd", 1),
    ],
)
def test_solve_query_reports_no_path(graphs, query):
    result = solve_query(graphs, query)

    assert not result.found
    assert result.path == []


def test_solve_queries_keeps_order_and_reuses_trees(graphs):
    queries = [Query("cat", "dog", 1), Query("cat", "ape", 1), Query("cat", "cog", 1)]

    results = list(solve_queries(graphs, queries))

    assert [result.query for result in results] == queries
    assert [result.cost for result in results] == [3, None, 2]

    solver = QuerySolver(graphs)
    assert solver.tree_for(3, 0) is solver.tree_for(3, 0)


def test_graph_error_only_fails_its_own_record(graphs, monkeypatch, caplog):
    calls = []
    real_tree_for = QuerySolver.tree_for

    def flaky(self, length, source):
        calls.append(source)
        if len(calls) == 1:
            raise GraphError("broken graph")
        return real_tree_for(self, length, source)

    monkeypatch.setattr(QuerySolver, "tree_for", flaky)

    with caplog.at_level(logging.ERROR, logger="solver"):
        results = list(solve_queries(graphs, [Query("cat", "dog", 1), Query("cat", "cot", 1)]))

    assert [result.found for result in results] == [False, True]
    assert "broken graph" in caplog.text


def test_format_result_with_path():
    result = QueryResult(Query("cat", "dog", 1), 3, ["cat", "cot", "cog", "dog"])

    assert format_result(result) == "cat 3\ncot\ncog\ndog\n"


def test_format_result_without_path():
    assert format_result(QueryResult(Query("cat", "ape", 1))) == "cat -1\nape\n"


def test_format_result_same_word():
    result = QueryResult(Query("cog", "cog", 1), 0, ["cog"])

    assert format_result(result) == "cog 0\ncog\n"


def test_zero_bound_graph_only_joins_identical_words():
    graph = Graph(2, 0)
    graph.insert("cat")
    graph.insert("cot")
    graph.build_edges(lambda a, b, limit: sum(x != y for x, y in zip(a, b)))

    assert not solve_query({3: graph}, Query("cat", "cot", 0)).found
    assert solve_query({3: graph}, Query("cat", "cat", 0)).cost == 0
