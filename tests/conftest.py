import sys
from pathlib import Path

# Ensure the top-level modules import from the repository root
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import matplotlib

matplotlib.use("Agg")

import pytest

from graph import Graph


@pytest.fixture
def chain_graph() -> Graph:
    """A - B - C with unit weights and no direct A - C edge."""
    graph = Graph(3, 1)
    for item in ("A", "B", "C"):
        graph.insert(item)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 1)
    return graph


@pytest.fixture
def dictionary_file(tmp_path: Path) -> Path:
    path = tmp_path / "words.dic"
    path.write_text("cat cot\ncog dog ape cat\nlonger\n", encoding="utf-8")
    return path
