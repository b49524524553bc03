"""Graphs as adjacency matrices and adjacency lists, with DFS and BFS."""

from dskit.errors import CapacityError, InvalidPositionError
from dskit.queues import LinkedQueue

MAX_VSIZE = 100


class AdjacencyMatrixGraph:
    """A graph of labelled vertices whose edges are a square matrix."""

    def __init__(self, vertices, matrix):
        self._labels = tuple(vertices)
        self._adj = [list(row) for row in matrix]
        n = len(self._labels)
        if len(self._adj) != n or any(len(row) != n for row in self._adj):
            raise ValueError("matrix must be square and match the vertices")

    @property
    def vertices(self):
        """The vertex labels, by index."""
        return self._labels

    def _check(self, v):
        if not 0 <= v < len(self._labels):
            raise InvalidPositionError()

    def degree(self, v):
        """Return the number of edges leaving vertex ``v``."""
        self._check(v)
        return sum(1 for weight in self._adj[v] if weight != 0)

    def dfs(self, start):
        """Return the labels in depth-first order from ``start``."""
        self._check(start)
        visited = [False] * len(self._labels)
        order = []

        def visit(v):
            visited[v] = True
            order.append(self._labels[v])
            for w, weight in enumerate(self._adj[v]):
                if weight != 0 and not visited[w]:
                    visit(w)

        visit(start)
        return order

    def bfs(self, start):
        """Return the labels in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * len(self._labels)
        order = [self._labels[start]]
        visited[start] = True
        queue = LinkedQueue()
        queue.enqueue(start)
        while not queue.is_empty():
            v = queue.dequeue()
            for w, weight in enumerate(self._adj[v]):
                if weight != 0 and not visited[w]:
                    order.append(self._labels[w])
                    visited[w] = True
                    queue.enqueue(w)
        return order


class AdjacencyListGraph:
    """A graph whose vertices each keep a list of adjacent vertex ids.

    New edges are placed at the front of a vertex's list.
    """

    def __init__(self):
        self._labels = []
        self._adj = []

    @property
    def vertices(self):
        """The vertex labels, by index."""
        return tuple(self._labels)

    def _check(self, v):
        if not 0 <= v < len(self._labels):
            raise InvalidPositionError()

    def append_vertex(self, label):
        """Add a vertex and return its index."""
        if len(self._labels) >= MAX_VSIZE:
            raise CapacityError("Overflow Error(vertex)")
        self._labels.append(label)
        self._adj.append([])
        return len(self._labels) - 1

    def insert_edge_directed(self, u, v):
        """Add an edge from ``u`` to ``v``."""
        self._check(u)
        self._check(v)
        self._adj[u].insert(0, v)

    def insert_edge(self, u, v):
        """Add an undirected edge between ``u`` and ``v``."""
        self.insert_edge_directed(u, v)
        self.insert_edge_directed(v, u)

    def neighbors(self, v):
        """Return the ids adjacent to ``v``, most recently added first."""
        self._check(v)
        return list(self._adj[v])

    def degree(self, v):
        """Return the number of edges leaving vertex ``v``."""
        self._check(v)
        return len(self._adj[v])

    def dfs(self, start):
        """Return the labels in depth-first order from ``start``."""
        self._check(start)
        visited = [False] * len(self._labels)
        order = []

        def visit(v):
            order.append(self._labels[v])
            visited[v] = True
            for w in self._adj[v]:
                if not visited[w]:
                    visit(w)

        visit(start)
        return order

    def bfs(self, start):
        """Return the labels in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * len(self._labels)
        queue = LinkedQueue()
        queue.enqueue(start)
        visited[start] = True
        order = [self._labels[start]]
        while not queue.is_empty():
            v = queue.dequeue()
            for w in self._adj[v]:
                if not visited[w]:
                    queue.enqueue(w)
                    visited[w] = True
                    order.append(self._labels[w])
        return order

    def clear(self):
        """Remove every vertex and edge."""
        self._labels = []
        self._adj = []

    def __len__(self):
        return len(self._labels)