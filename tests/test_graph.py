import pytest

from algokit.graph import Graph, load_graph, main, read_node_file
from algokit.records import Record

NODE_FILE = """Nodes:
1 a
2 b
3 c
4 d
Edges:
3 1
3 2
1 4
"""


def _graph(node_ids, edges):
    graph = Graph()
    for node_id in node_ids:
        graph.add_node(node_id, f"n{node_id}")
    for src, dest in edges:
        graph.add_edge(src, dest)
    return graph


@pytest.fixture
def node_file(tmp_path):
    path = tmp_path / "node.txt"
    path.write_text(NODE_FILE, encoding="utf-8")
    return path


def test_dfs_order_follows_stack():
    graph = _graph([1, 2, 3, 4], [(3, 1), (3, 2), (1, 4)])
    assert [node.num for node in graph.dfs(3)] == [3, 2, 1, 4]


def test_dfs_visits_reachable_nodes_once():
    edges = [(1, 2), (2, 3), (3, 1), (1, 3), (4, 5), (5, 6)]
    graph = _graph([1, 2, 3, 4, 5, 6], edges)
    ids = [node.num for node in graph.dfs(1)]
    assert ids[0] == 1
    assert len(ids) == len(set(ids))
    assert set(ids) == {1, 2, 3}


def test_dfs_single_node_with_self_loop():
    graph = _graph([7], [(7, 7)])
    assert list(graph.dfs(7)) == [Record(7, "n7")]


def test_dfs_unknown_start_raises():
    graph = _graph([1], [])
    with pytest.raises(KeyError):
        graph.dfs(42)


def test_add_edge_unknown_node_raises():
    graph = _graph([1], [])
    with pytest.raises(KeyError):
        graph.add_edge(1, 2)


def test_duplicate_node_raises():
    graph = _graph([1], [])
    with pytest.raises(ValueError):
        graph.add_node(1, "again")


def test_read_node_file(node_file):
    nodes, edges = read_node_file(node_file)
    assert nodes == [Record(1, "a"), Record(2, "b"), Record(3, "c"), Record(4, "d")]
    assert edges == [(3, 1), (3, 2), (1, 4)]


def test_read_node_file_skips_bad_lines(tmp_path):
    path = tmp_path / "node.txt"
    path.write_text("header\n5 e\nbroken\nx y\nEdges:\n5 5\n5 z\n", encoding="utf-8")
    nodes, edges = read_node_file(path)
    assert nodes == [Record(5, "e")]
    assert edges == [(5, 5)]


def test_load_graph_matches_manual_graph(node_file):
    loaded = load_graph(node_file)
    assert len(loaded) == 4
    manual = Graph()
    for node in loaded.nodes:
        manual.add_node(node.num, node.string)
    for src, dest in [(3, 1), (3, 2), (1, 4)]:
        manual.add_edge(src, dest)
    assert list(loaded.dfs(3)) == list(manual.dfs(3))


def test_main_prints_traversal(node_file, capsys):
    assert main([str(node_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Stack-Based DFS starting from node with ID 3:"
    assert lines[1] == "Visited: 3 c"
    assert sorted(lines[1:]) == sorted(
        ["Visited: 1 a", "Visited: 2 b", "Visited: 3 c", "Visited: 4 d"]
    )


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error opening file!" in capsys.readouterr().out


def test_main_unknown_start(node_file, capsys):
    assert main([str(node_file), "--start", "99"]) == 1
    assert "unknown node id 99" in capsys.readouterr().err