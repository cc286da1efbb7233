"""Dynamic programming on trees."""

from __future__ import annotations

from typing import Iterable, Sequence

MOD = 1_000_000_007


def count_mixed_partitions(
    labels: Sequence[str], edges: Iterable[tuple[int, int]]
) -> int:
    """Ways to cut tree edges so every part holds both an 'a' and a 'b' vertex.

    The count is taken modulo 10**9+7.
    """
    labels = list(labels)
    n = len(labels)
    if n == 0:
        raise ValueError("tree must have a vertex")
    for ch in labels:
        if ch not in ("a", "b"):
            raise ValueError(f"unknown label {ch!r}")
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    parent = [-1] * n
    order = []
    seen = [False] * n
    seen[0] = True
    stack = [0]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                stack.append(v)
    only_a = [0] * n
    only_b = [0] * n
    mixed = [0] * n
    for u in reversed(order):
        own = 1
        combined = 1
        for v in adj[u]:
            if v == parent[u]:
                continue
            keep_same = only_a[v] if labels[u] == "a" else only_b[v]
            own = own * (keep_same + mixed[v]) % MOD
            combined = combined * (only_a[v] + only_b[v] + 2 * mixed[v]) % MOD
        if labels[u] == "a":
            only_a[u] = own
        else:
            only_b[u] = own
        mixed[u] = (combined - own) % MOD
    return mixed[0]