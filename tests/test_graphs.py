import math

import pytest

from dsakit.graphs import CityGraph, Graph, WeightedGraph

EDGES = [(0, 1), (1, 2), (2, 3), (3, 5), (5, 6), (4, 5), (0, 4), (3, 4)]


@pytest.fixture
def graph():
    g = Graph(7)
    for i, j in EDGES:
        g.add_edge(i, j)
    return g


@pytest.fixture
def weighted():
    g = WeightedGraph(5)
    for u, v, w in [(0, 1, 1), (1, 2, 1), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]:
        g.add_edge(u, v, w)
    return g


def test_undirected_edge_goes_both_ways():
    g = Graph(3)
    g.add_edge(0, 1)
    assert g.neighbours(0) == [1]
    assert g.neighbours(1) == [0]


def test_directed_edge_one_way():
    g = Graph(3)
    g.add_edge(0, 2, undirected=False)
    assert g.neighbours(0) == [2]
    assert g.neighbours(2) == []


def test_format_adj_list():
    g = Graph(3)
    g.add_edge(0, 1)
    assert g.format_adj_list() == "0-->1,\n1-->0,\n2-->\n"


def test_bfs_order(graph):
    assert graph.bfs(1) == [1, 0, 2, 4, 3, 5, 6]


def test_bfs_visits_each_reachable_node_once(graph):
    order = graph.bfs(3)
    assert order[0] == 3
    assert sorted(order) == list(range(7))


def test_traversals_stay_in_component():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(2, 3)
    assert set(g.bfs(0)) == {0, 1}
    assert set(g.dfs(3)) == {2, 3}


def test_dfs_on_path_follows_path():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    assert g.dfs(0) == [0, 1, 2, 3]


def test_dfs_visits_each_node_once(graph):
    order = graph.dfs(1)
    assert order[0] == 1
    assert sorted(order) == list(range(7))


def test_unknown_node_raises():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.add_edge(0, 5)
    with pytest.raises(IndexError):
        g.bfs(-1)


def test_city_graph_directed_by_default():
    g = CityGraph(["Delhi", "London", "Paris", "New York"])
    g.add_edge("Delhi", "London")
    g.add_edge("New York", "London")
    g.add_edge("Delhi", "Paris")
    g.add_edge("Paris", "New York")
    assert g.neighbours("Delhi") == ["London", "Paris"]
    assert g.neighbours("London") == []
    lines = g.format_adj_list().splitlines()
    assert [line.split("-->")[0] for line in lines] == ["Delhi", "London", "Paris", "New York"]
    assert "Delhi-->London,Paris," in lines


def test_city_graph_undirected_and_unknown():
    g = CityGraph(["Delhi", "Paris"])
    g.add_edge("Delhi", "Paris", undirected=True)
    assert g.neighbours("Paris") == ["Delhi"]
    with pytest.raises(KeyError):
        g.add_edge("Delhi", "Rome")


def test_dijkstra(weighted):
    assert weighted.dijkstra(0, 4) == 7


def test_distances_respect_every_edge(weighted):
    dist = weighted.shortest_distances(0)
    assert dist[0] == 0
    edges = [(0, 1, 1), (1, 2, 1), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]
    for u, v, w in edges:
        assert dist[v] <= dist[u] + w
        assert dist[u] <= dist[v] + w


def test_dijkstra_symmetric_for_undirected(weighted):
    assert weighted.dijkstra(4, 0) == weighted.dijkstra(0, 4)


def test_unreachable_is_infinite():
    g = WeightedGraph(3)
    g.add_edge(0, 1, 5)
    assert g.dijkstra(0, 1) == 5
    assert g.dijkstra(0, 2) == math.inf