import io

import pytest

from dsalgo.union_find import Edge, UnionFind, best_route, kruskal, main, relatives


def test_source_merge_sequence():
    sets = UnionFind(9)
    for x, y in [(1, 3), (1, 2), (5, 4), (2, 4), (6, 8), (8, 7)]:
        sets.union(x, y)
    assert sets.find(2) == sets.find(4)
    assert not sets.connected(2, 6)
    assert sets.connected(6, 7)


def test_union_reports_merge():
    sets = UnionFind(4)
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert len(sets) == 4


def test_fresh_elements_are_their_own_roots():
    sets = UnionFind(5)
    assert [sets.find(i) for i in range(5)] == [0, 1, 2, 3, 4]


def test_find_out_of_range():
    sets = UnionFind(3)
    with pytest.raises(IndexError):
        sets.find(3)
    with pytest.raises(IndexError):
        sets.find(-1)


def test_negative_size():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_kruskal_picks_cheapest_tree():
    edges = [Edge("A", "B", 1), Edge("B", "C", 2), Edge("A", "C", 3), Edge("C", "D", 4)]
    chosen = kruskal(edges)
    assert chosen == [edges[0], edges[1], edges[3]]


def test_kruskal_accepts_tuples_and_spans():
    edges = [("a", "b", 7), ("b", "c", 1), ("a", "c", 2), ("c", "d", 5), ("b", "d", 3)]
    chosen = kruskal(edges)
    vertices = {v for e in edges for v in e[:2]}
    assert len(chosen) == len(vertices) - 1
    sets = UnionFind(len(vertices))
    index = {v: i for i, v in enumerate(sorted(vertices))}
    for edge in chosen:
        assert sets.union(index[edge.start], index[edge.end])


def test_kruskal_empty():
    assert kruskal([]) == []


def test_relatives():
    answers = relatives(5, [(1, 2), (2, 3), (4, 5)], [(1, 3), (1, 4), (4, 5)])
    assert answers == [True, False, True]


def test_best_route():
    roads = [(1, 2, 5), (2, 3, 3), (1, 3, 10)]
    assert best_route(3, roads, 1, 3) == 5


def test_best_route_missing():
    assert best_route(4, [(1, 2, 1), (3, 4, 2)], 1, 4) is None


def test_main_prints_weight(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3 1 3\n1 2 5\n2 3 3\n1 3 10\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "5"


def test_main_rejects_short_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 3 1 3\n1 2 5\n"))
    assert main([]) == 1


def test_main_no_route(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 1 1 4\n1 2 1\n"))
    assert main([]) == 1
    assert capsys.readouterr().out == ""