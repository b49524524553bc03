"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from dataclasses import dataclass
from typing import NamedTuple

from dskit.errors import UnderflowError
from dskit.heap import PriorityHeap

INF = 9999


class DisjointSet:
    """Union-find over the elements ``0 .. n-1``, each starting alone."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = [-1] * n
        self._sets = n

    def find(self, item):
        """Return the representative of the set holding ``item``."""
        while self._parent[item] >= 0:
            item = self._parent[item]
        return item

    def union(self, s1, s2):
        """Join the set represented by ``s1`` under the one represented by ``s2``."""
        self._parent[s1] = s2
        self._sets -= 1

    def __len__(self):
        """The number of distinct sets."""
        return self._sets


@dataclass(frozen=True)
class EdgeDecision:
    """An edge considered by Kruskal's algorithm and whether it was kept."""

    u: int
    v: int
    weight: int
    accepted: bool


class _Edge(NamedTuple):
    weight: int
    u: int
    v: int


def kruskal(weights):
    """Return the edges considered, in order, while building a minimum spanning tree.

    ``weights`` is a symmetric matrix in which 0 or ``INF`` means no edge.
    Raises ValueError if the graph is not connected.
    """
    n = len(weights)
    edges = [
        _Edge(weights[i][j], i, j)
        for i in range(n - 1)
        for j in range(i + 1, n)
        if 0 < weights[i][j] < INF
    ]
    heap = PriorityHeap(lambda a, b: b.weight - a.weight, capacity=len(edges) + 2)
    for edge in edges:
        heap.push(edge)

    sets = DisjointSet(n)
    decisions = []
    accepted = 0
    while accepted < n - 1:
        try:
            edge = heap.pop()
        except UnderflowError:
            raise ValueError("graph is not connected") from None
        uset = sets.find(edge.u)
        vset = sets.find(edge.v)
        keep = uset != vset
        if keep:
            sets.union(uset, vset)
            accepted += 1
        decisions.append(EdgeDecision(edge.u, edge.v, edge.weight, keep))
    return decisions


def prim(weights):
    """Return the vertices in the order Prim's algorithm adds them, from vertex 0.

    Stops early when the remaining vertices cannot be reached.
    """
    n = len(weights)
    if n == 0:
        return []
    selected = [False] * n
    dist = [INF] * n
    dist[0] = 0
    order = []
    for _ in range(n):
        candidates = [v for v in range(n) if not selected[v] and dist[v] < INF]
        if not candidates:
            break
        v = min(candidates, key=lambda u: dist[u])
        selected[v] = True
        order.append(v)
        for w in range(n):
            if not selected[w] and weights[v][w] < dist[w]:
                dist[w] = weights[v][w]
    return order