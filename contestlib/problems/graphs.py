"""Problems on general graphs: shortest paths, components, flows, matchings."""

from __future__ import annotations

from typing import Iterable, Sequence

from contestlib.flow import BipartiteMatching, Dinic
from contestlib.graphs import dijkstra, strongly_connected_components

_INF_CAPACITY = 1 << 59
_DX = (1, 1, 0, -1, -1, -1, 0, 1)
_DY = (0, 1, 1, 1, 0, -1, -1, -1)


def shortest_via_each_vertex(n: int, roads: Iterable[tuple[int, int, int]]) -> list:
    """Shortest length of a walk from 0 to ``n-1`` through each vertex.

    Roads are undirected ``(a, b, length)``; None where no such walk exists.
    """
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, c in roads:
        graph[a].append((b, c))
        graph[b].append((a, c))
    from_first = dijkstra(graph, 0)
    from_last = dijkstra(graph, n - 1)
    return [
        None if x is None or y is None else x + y
        for x, y in zip(from_first, from_last)
    ]


def mutually_reachable_pairs(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of unordered vertex pairs that reach each other in a digraph."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        graph[a].append(b)
    return sum(
        len(c) * (len(c) - 1) // 2 for c in strongly_connected_components(graph)
    )


def coauthor_distances(n: int, papers: Iterable[Sequence[int]]) -> list:
    """Collaboration distance of every author from author 0; None if unlinked."""
    papers = [list(p) for p in papers]
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + len(papers))]
    for k, authors in enumerate(papers):
        hub = n + k
        for v in authors:
            graph[v].append((hub, 1))
            graph[hub].append((v, 0))
    return dijkstra(graph, 0)[:n]


def max_collection_profit(
    w: int, rewards: Sequence[int], prerequisites: Sequence[Iterable[int]]
) -> int:
    """Best total reward minus ``w`` per item, where an item needs its prerequisites."""
    n = len(rewards)
    if len(prerequisites) != n:
        raise ValueError("one prerequisite list per item is required")
    source, sink = n, n + 1
    network = Dinic(n + 2)
    for i, a in enumerate(rewards):
        network.add_edge(source, i, a)
        network.add_edge(i, sink, w)
    for i, needs in enumerate(prerequisites):
        for j in needs:
            network.add_edge(j, i, _INF_CAPACITY)
    return max(0, sum(rewards) - network.max_flow(source, sink))


def soldier_directions(
    t: int,
    starts: Sequence[tuple[int, int]],
    goals: Sequence[tuple[int, int]],
) -> list[int] | None:
    """Direction (1-8) for each soldier so that, after ``t`` steps, every goal is taken.

    Returns None when no assignment exists.
    """
    n = len(starts)
    if len(goals) != n:
        raise ValueError("there must be as many goals as soldiers")
    ordered = sorted(tuple(g) for g in goals)
    index: dict[tuple[int, int], int] = {}
    for i, g in enumerate(ordered):
        index.setdefault(g, i)

    def moved(x: int, y: int, d: int) -> tuple[int, int]:
        return x + _DX[d] * t, y + _DY[d] * t

    matching = BipartiteMatching(n, n)
    for i, (x, y) in enumerate(starts):
        for d in range(8):
            p = index.get(moved(x, y, d))
            if p is not None:
                matching.add_edge(i, p)
    if matching.solve() != n:
        return None
    answer = []
    for i, (x, y) in enumerate(starts):
        target = ordered[matching.match_left[i]]
        answer.append(next(d + 1 for d in range(8) if moved(x, y, d) == target))
    return answer