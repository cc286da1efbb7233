import random
from collections import deque

import pytest

from contestlib.graphs import dijkstra, strongly_connected_components


def random_digraph(n, m, seed):
    rng = random.Random(seed)
    graph = [[] for _ in range(n)]
    for _ in range(m):
        graph[rng.randrange(n)].append(rng.randrange(n))
    return graph


def reachable(graph, src):
    seen = {src}
    q = deque([src])
    while q:
        u = q.popleft()
        for v in graph[u]:
            if v not in seen:
                seen.add(v)
                q.append(v)
    return seen


@pytest.mark.parametrize("seed", range(8))
def test_scc_invariants(seed):
    n = 10
    graph = random_digraph(n, 18, seed)
    comps = strongly_connected_components(graph)
    flat = [v for c in comps for v in c]
    assert sorted(flat) == list(range(n))
    reach = [reachable(graph, u) for u in range(n)]
    index = {v: i for i, c in enumerate(comps) for v in c}
    for u in range(n):
        for v in range(n):
            mutual = v in reach[u] and u in reach[v]
            assert mutual == (index[u] == index[v])
    for u in range(n):
        for v in graph[u]:
            assert index[u] <= index[v]


def test_scc_small_example():
    graph = [[1], [2], [0, 3], []]
    comps = strongly_connected_components(graph)
    assert [set(c) for c in comps] == [{0, 1, 2}, {3}]


def test_scc_empty():
    assert strongly_connected_components([]) == []


@pytest.mark.parametrize("seed", range(8))
def test_dijkstra_matches_relaxation(seed):
    rng = random.Random(seed)
    n = 9
    graph = [[] for _ in range(n)]
    for _ in range(20):
        graph[rng.randrange(n)].append((rng.randrange(n), rng.randint(0, 9)))
    source = rng.randrange(n)
    dist = [None] * n
    dist[source] = 0
    for _ in range(n):
        for u in range(n):
            if dist[u] is None:
                continue
            for v, w in graph[u]:
                if dist[v] is None or dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
    assert dijkstra(graph, source) == dist


def test_dijkstra_unreachable_and_source():
    graph = [[(1, 5)], [], []]
    result = dijkstra(graph)
    assert result[0] == 0
    assert result[1] == 5
    assert result[2] is None


def test_dijkstra_bad_source():
    with pytest.raises(IndexError):
        dijkstra([[]], 3)