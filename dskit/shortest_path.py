"""Single-source and all-pairs shortest paths on weight matrices."""

from dskit.errors import InvalidPositionError

INF = 999


def dijkstra(weights, start=0):
    """Run Dijkstra's algorithm from ``start`` over a weight matrix.

    ``weights[v][w]`` is the edge weight, with ``INF`` meaning no edge.
    Returns one ``(vertex, distances)`` pair per vertex fixed, in the order
    they are fixed; ``distances`` is a snapshot of every tentative distance
    after that vertex's neighbours were relaxed. The last snapshot holds the
    final distances. Vertices that cannot be reached are never fixed.
    """
    n = len(weights)
    if not 0 <= start < n:
        raise InvalidPositionError()
    selected = [False] * n
    dist = [INF] * n
    dist[start] = 0
    steps = []
    for _ in range(n):
        candidates = [v for v in range(n) if not selected[v] and dist[v] < INF]
        if not candidates:
            break
        v = min(candidates, key=dist.__getitem__)
        selected[v] = True
        for w in range(n):
            if not selected[w] and dist[v] + weights[v][w] < dist[w]:
                dist[w] = dist[v] + weights[v][w]
        steps.append((v, tuple(dist)))
    return steps


def floyd(weights):
    """Run Floyd's algorithm over a weight matrix.

    Returns the distance matrix after each intermediate vertex has been
    allowed, one snapshot per vertex; the last one holds the shortest
    distances between every pair. ``INF`` marks pairs with no path.
    """
    n = len(weights)
    if any(len(row) != n for row in weights):
        raise ValueError("weight matrix must be square")
    dist = [list(row) for row in weights]
    snapshots = []
    for k in range(n):
        for i in range(n):
            for j in range(n):
                if dist[i][k] + dist[k][j] < dist[i][j]:
                    dist[i][j] = dist[i][k] + dist[k][j]
        snapshots.append(tuple(tuple(row) for row in dist))
    return snapshots