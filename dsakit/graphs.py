"""Adjacency-list graphs with breadth-first, depth-first and Dijkstra searches."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable


class Graph:
    """Graph over nodes ``0 .. vertices-1`` stored as adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} is not in the graph")

    def add_edge(self, i: int, j: int, undirected: bool = True) -> None:
        """Add an edge from ``i`` to ``j``, and back again when undirected."""
        self._check(i)
        self._check(j)
        self._adjacency[i].append(j)
        if undirected:
            self._adjacency[j].append(i)

    def neighbours(self, node: int) -> list[int]:
        """Return the neighbours of ``node`` in the order they were added."""
        self._check(node)
        return list(self._adjacency[node])

    def format_adj_list(self) -> str:
        """Return one ``node-->a,b,`` line per node."""
        return "".join(
            f"{node}-->{''.join(f'{nbr},' for nbr in nbrs)}\n"
            for node, nbrs in enumerate(self._adjacency)
        )

    def bfs(self, source: int) -> list[int]:
        """Return the nodes reachable from ``source`` in breadth-first order."""
        self._check(source)
        visited = {source}
        queue = deque([source])
        order: list[int] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacency[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def dfs(self, source: int) -> list[int]:
        """Return the nodes reachable from ``source`` in depth-first order."""
        self._check(source)
        visited: set[int] = set()
        order: list[int] = []

        def visit(node: int) -> None:
            visited.add(node)
            order.append(node)
            for nbr in self._adjacency[node]:
                if nbr not in visited:
                    visit(nbr)

        visit(source)
        return order


class CityGraph:
    """Graph whose nodes are named cities; edges are directed by default."""

    def __init__(self, cities: Iterable[str]) -> None:
        self._adjacency: dict[str, list[str]] = {city: [] for city in cities}

    def _check(self, city: str) -> None:
        if city not in self._adjacency:
            raise KeyError(city)

    def add_edge(self, x: str, y: str, undirected: bool = False) -> None:
        """Add an edge from city ``x`` to city ``y``, and back when undirected."""
        self._check(x)
        self._check(y)
        self._adjacency[x].append(y)
        if undirected:
            self._adjacency[y].append(x)

    def neighbours(self, city: str) -> list[str]:
        """Return the cities reachable in one step from ``city``."""
        self._check(city)
        return list(self._adjacency[city])

    def format_adj_list(self) -> str:
        """Return one ``city-->a,b,`` line per city."""
        return "".join(
            f"{city}-->{''.join(f'{nbr},' for nbr in nbrs)}\n"
            for city, nbrs in self._adjacency.items()
        )


class WeightedGraph:
    """Graph over nodes ``0 .. vertices-1`` with weighted edges."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adjacency):
            raise IndexError(f"node {node} is not in the graph")

    def add_edge(self, u: int, v: int, weight: int, undirected: bool = True) -> None:
        """Add an edge from ``u`` to ``v`` of the given weight."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append((weight, v))
        if undirected:
            self._adjacency[v].append((weight, u))

    def shortest_distances(self, source: int) -> list[float]:
        """Return the shortest distance from ``source`` to every node.

        Unreachable nodes get ``math.inf``.
        """
        self._check(source)
        dist: list[float] = [math.inf] * len(self._adjacency)
        dist[source] = 0
        frontier = [(0, source)]
        while frontier:
            so_far, node = heapq.heappop(frontier)
            if so_far > dist[node]:
                continue
            for weight, nbr in self._adjacency[node]:
                candidate = so_far + weight
                if candidate < dist[nbr]:
                    dist[nbr] = candidate
                    heapq.heappush(frontier, (candidate, nbr))
        return dist

    def dijkstra(self, source: int, dest: int) -> float:
        """Return the shortest distance from ``source`` to ``dest``."""
        self._check(dest)
        return self.shortest_distances(source)[dest]