import io

from hypothesis import given
from hypothesis import strategies as st
import pytest

from dskit.graph import SENTINEL, Graph, main, read_graph


def _reachable(edges, start):
    seen = {start}
    frontier = [start]
    while frontier:
        vertex = frontier.pop()
        for a, b in edges:
            if a == vertex and b not in seen:
                seen.add(b)
                frontier.append(b)
    return seen


def test_create():
    graph = Graph(4)
    assert graph.size == 4
    for vertex in range(4):
        assert graph.dfs(vertex) == [vertex]
        assert graph.bfs(vertex) == [vertex]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_edge_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.dfs(5)


def test_dfs_goes_deep_before_wide():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    assert graph.dfs(0) == [0, 1, 3, 2]


def test_bfs_goes_wide_before_deep():
    graph = Graph(4)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    assert graph.bfs(0) == [0, 1, 2, 3]


@given(st.data())
def test_traversals_visit_reachable_once(data):
    size = data.draw(st.integers(1, 12))
    vertices = st.integers(0, size - 1)
    edges = data.draw(st.lists(st.tuples(vertices, vertices)))
    start = data.draw(vertices)
    graph = Graph(size)
    for vertex, neighbour in edges:
        graph.add_edge(vertex, neighbour)
    expected = _reachable(edges, start)
    for order in (graph.dfs(start), graph.bfs(start)):
        assert order[0] == start
        assert len(order) == len(set(order))
        assert set(order) == expected


def test_read_graph():
    text = f"3\n1 2 {SENTINEL}\n2 {SENTINEL}\n{SENTINEL}\n"
    graph = read_graph(io.StringIO(text))
    assert graph.size == 3
    assert graph.dfs(0) == graph.bfs(0) == [0, 1, 2]
    assert graph.dfs(2) == [2]


def test_read_graph_errors():
    with pytest.raises(ValueError):
        read_graph(io.StringIO(""))
    with pytest.raises(ValueError):
        read_graph(io.StringIO("2 1"))
    with pytest.raises(ValueError):
        read_graph(io.StringIO("x"))
    with pytest.raises(IndexError):
        read_graph(io.StringIO(f"1 3 {SENTINEL}"))


def test_main_prints_traversals(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text(f"3 1 2 {SENTINEL} {SENTINEL} {SENTINEL}\n", encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["DFS: 0,1,2", "BFS: 0,1,2"]


def test_main_bad_input_exits(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("2 1", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        main([str(path)])
    assert info.value.code == 2