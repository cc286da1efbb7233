"""Strongly connected components and single-source shortest paths."""

from __future__ import annotations

import heapq
from typing import Sequence


def strongly_connected_components(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Components of a directed graph, in topological order of the condensation."""
    n = len(graph)
    done = [False] * n
    pos = [-1] * n
    low = [0] * n
    stack: list[int] = []
    result: list[list[int]] = []
    for start in range(n):
        if done[start]:
            continue
        pos[start] = low[start] = len(stack)
        stack.append(start)
        calls = [(start, iter(graph[start]))]
        while calls:
            u, edges = calls[-1]
            for v in edges:
                if done[v]:
                    continue
                if pos[v] == -1:
                    pos[v] = low[v] = len(stack)
                    stack.append(v)
                    calls.append((v, iter(graph[v])))
                    break
                low[u] = min(low[u], pos[v])
            else:
                calls.pop()
                if low[u] == pos[u]:
                    component = stack[low[u]:]
                    for w in component:
                        done[w] = True
                    del stack[low[u]:]
                    result.append(component)
                if calls:
                    parent = calls[-1][0]
                    low[parent] = min(low[parent], low[u])
    result.reverse()
    return result


def dijkstra(graph: Sequence[Sequence[tuple[int, int]]], source: int = 0) -> list:
    """Distances from ``source`` over ``(target, weight)`` lists; None if unreachable."""
    n = len(graph)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    dist: list = [None] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, w in graph[u]:
            nd = d + w
            if dist[v] is None or nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist