import random
from collections import deque

import pytest

from contestlib.problems.graphs import (
    coauthor_distances,
    max_collection_profit,
    mutually_reachable_pairs,
    shortest_via_each_vertex,
    soldier_directions,
)

DX = (1, 1, 0, -1, -1, -1, 0, 1)
DY = (0, 1, 1, 1, 0, -1, -1, -1)


@pytest.mark.parametrize("seed", range(6))
def test_shortest_via_matches_floyd(seed):
    rng = random.Random(seed)
    n = 8
    roads = [(i, rng.randrange(i), rng.randint(1, 9)) for i in range(1, n)]
    roads += [(rng.randrange(n), rng.randrange(n), rng.randint(1, 9)) for _ in range(6)]
    inf = float("inf")
    d = [[0 if i == j else inf for j in range(n)] for i in range(n)]
    for a, b, c in roads:
        d[a][b] = min(d[a][b], c)
        d[b][a] = min(d[b][a], c)
    for k in range(n):
        for i in range(n):
            for j in range(n):
                d[i][j] = min(d[i][j], d[i][k] + d[k][j])
    result = shortest_via_each_vertex(n, roads)
    assert result == [d[0][k] + d[k][n - 1] for k in range(n)]
    assert result[0] == result[n - 1] == min(result)


def test_shortest_via_disconnected_vertex():
    result = shortest_via_each_vertex(3, [(0, 2, 4)])
    assert result[1] is None
    assert result[0] == result[2]


def test_mutually_reachable_sample():
    edges = [(0, 1), (1, 0), (1, 2), (3, 2), (3, 0), (0, 3), (1, 2)]
    assert mutually_reachable_pairs(4, edges) == 3


@pytest.mark.parametrize("seed", range(6))
def test_mutually_reachable_matches_closure(seed):
    rng = random.Random(seed)
    n = 9
    edges = [(rng.randrange(n), rng.randrange(n)) for _ in range(15)]
    adj = [[] for _ in range(n)]
    for a, b in edges:
        adj[a].append(b)
    reach = []
    for s in range(n):
        seen = {s}
        q = deque([s])
        while q:
            u = q.popleft()
            for v in adj[u]:
                if v not in seen:
                    seen.add(v)
                    q.append(v)
        reach.append(seen)
    expected = sum(
        1 for u in range(n) for v in range(u + 1, n) if v in reach[u] and u in reach[v]
    )
    assert mutually_reachable_pairs(n, edges) == expected


@pytest.mark.parametrize("seed", range(6))
def test_coauthor_distances_match_bfs(seed):
    rng = random.Random(seed)
    n = 10
    papers = [rng.sample(range(n), rng.randint(1, 3)) for _ in range(5)]
    adj = [set() for _ in range(n)]
    for paper in papers:
        for a in paper:
            adj[a].update(b for b in paper if b != a)
    dist = [None] * n
    dist[0] = 0
    q = deque([0])
    while q:
        u = q.popleft()
        for v in adj[u]:
            if dist[v] is None:
                dist[v] = dist[u] + 1
                q.append(v)
    assert coauthor_distances(n, papers) == dist


def test_collection_profit_length_mismatch():
    with pytest.raises(ValueError):
        max_collection_profit(1, [1, 2], [[]])


def test_soldiers_impossible():
    assert soldier_directions(1, [(0, 0)], [(5, 5)]) is None


@pytest.mark.parametrize("seed", range(6))
def test_soldier_directions_are_valid(seed):
    rng = random.Random(seed)
    t = rng.randint(1, 3)
    while True:
        starts = rng.sample([(x, y) for x in range(6) for y in range(6)], 5)
        goals = [
            (x + DX[d] * t, y + DY[d] * t)
            for (x, y), d in zip(starts, (rng.randrange(8) for _ in starts))
        ]
        if len(set(goals)) == len(goals):
            break
    shuffled = goals[:]
    rng.shuffle(shuffled)
    directions = soldier_directions(t, starts, shuffled)
    assert len(directions) == len(starts)
    reached = [
        (x + DX[d - 1] * t, y + DY[d - 1] * t) for (x, y), d in zip(starts, directions)
    ]
    assert sorted(reached) == sorted(goals)


def test_soldier_length_mismatch():
    with pytest.raises(ValueError):
        soldier_directions(1, [(0, 0)], [])