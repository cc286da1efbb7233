"""Search problems: binary searches, sliding windows, greedy scans and enumeration."""

from __future__ import annotations

import bisect
from collections import Counter
from typing import Iterable, Sequence

_UNKNOWN = -1
_COST_LIMIT = 1_000_000_000
_FAR = 1 << 59


def _can_split(length: int, cuts: Sequence[int], k: int, piece: int) -> bool:
    last = 0
    count = 0
    for c in cuts:
        if count == k:
            break
        if c - last >= piece:
            last = c
            count += 1
    return count >= k and length - last >= piece


def max_min_piece(length: int, cuts: Iterable[int], k: int) -> int:
    """Largest possible shortest piece when cutting a bar at ``k`` of the given marks.

    ``cuts`` are increasing positions strictly inside ``(0, length)``.
    """
    cuts = list(cuts)
    if not 1 <= k <= len(cuts):
        raise ValueError("k must lie between 1 and the number of marks")
    low, high = 1, length
    while low < high:
        mid = (low + high + 1) // 2
        if _can_split(length, cuts, k, mid):
            low = mid
        else:
            high = mid - 1
    return low


def nearest_rating_gaps(ratings: Iterable[int], queries: Iterable[int]) -> list[int]:
    """Distance from each query to the closest rating."""
    ordered = sorted(ratings)
    if not ordered:
        raise ValueError("at least one rating is required")
    answers = []
    for b in queries:
        i = bisect.bisect_left(ordered, b)
        best = _COST_LIMIT
        if i < len(ordered):
            best = min(best, abs(ordered[i] - b))
        if i > 0:
            best = min(best, abs(ordered[i - 1] - b))
        answers.append(best)
    return answers


def can_cut_tenth(pieces: Sequence[int]) -> bool:
    """Whether some arc of consecutive pieces on a ring makes exactly a tenth of the total.

    Piece sizes must be non-negative.
    """
    pieces = list(pieces)
    n = len(pieces)
    total = sum(pieces)
    if total % 10:
        return False
    target = total // 10
    prefix = [0]
    for x in pieces + pieces:
        prefix.append(prefix[-1] + x)
    for i in range(n):
        want = prefix[i] + target
        j = bisect.bisect_left(prefix, want, i + 1, i + n + 1)
        if j <= i + n and prefix[j] == want:
            return True
    return False


def _pairs_within(matrix: Sequence[Sequence[int]], p: int, unknown: int | None) -> int:
    n = len(matrix)
    fill = _FAR if unknown is None else unknown
    dist = [
        [0 if i == j else (w if w != _UNKNOWN else fill) for j, w in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for k in range(n):
        through = dist[k]
        for row in dist:
            dik = row[k]
            for j in range(n):
                if dik + through[j] < row[j]:
                    row[j] = dik + through[j]
    return sum(1 for i in range(n) for j in range(i + 1, n) if dist[i][j] <= p)


def count_unknown_costs(p: int, k: int, matrix: Sequence[Sequence[int]]) -> int | None:
    """Number of positive costs for the unknown (-1) roads leaving exactly ``k``
    town pairs within distance ``p``; None when infinitely many costs work."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    if _pairs_within(matrix, p, None) == k:
        return None

    def largest(accept) -> int:
        low, high = 0, _COST_LIMIT
        while low < high:
            mid = (low + high + 1) // 2
            if accept(_pairs_within(matrix, p, mid)):
                low = mid
            else:
                high = mid - 1
        return low

    upper = largest(lambda c: c >= k)
    lower = largest(lambda c: c > k)
    if _pairs_within(matrix, p, upper) != k:
        return 0
    return max(0, upper - lower)


def _subset_sums(values: Sequence[int]) -> list[tuple[int, int]]:
    sums = [(0, 0)]
    for x in values:
        sums += [(c + 1, t + x) for c, t in sums]
    return sums


def count_cheap_selections(k: int, p: int, prices: Sequence[int]) -> int:
    """Number of ways to pick exactly ``k`` of the positive prices with total at most ``p``."""
    prices = list(prices)
    half = len(prices) // 2
    left, right = prices[:half], prices[half:]
    by_count: list[list[int]] = [[] for _ in range(len(left) + 1)]
    for count, total in _subset_sums(left):
        by_count[count].append(total)
    for group in by_count:
        group.sort()
    answer = 0
    for count, total in _subset_sums(right):
        need = k - count
        if 0 <= need <= len(left):
            answer += bisect.bisect_right(by_count[need], p - total)
    return answer


def longest_k_distinct(k: int, a: Sequence[int]) -> int:
    """Length of the longest window of ``a`` holding at most ``k`` distinct values."""
    freq: Counter = Counter()
    distinct = 0
    best = 0
    j = 0
    for i, x in enumerate(a):
        freq[x] += 1
        if freq[x] == 1:
            distinct += 1
        while distinct > k:
            freq[a[j]] -= 1
            if freq[a[j]] == 0:
                distinct -= 1
            j += 1
        best = max(best, i - j + 1)
    return best


def smallest_subsequence(s: str, k: int) -> str:
    """Lexicographically smallest subsequence of ``s`` of length ``k``."""
    n = len(s)
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and the length of the string")
    positions: dict[str, list[int]] = {}
    for i, ch in enumerate(s):
        positions.setdefault(ch, []).append(i)
    letters = sorted(positions)
    last = -1
    chosen = []
    for step in range(k):
        remaining = k - step
        for ch in letters:
            pos = positions[ch]
            j = bisect.bisect_right(pos, last)
            if j < len(pos) and pos[j] + remaining - 1 < n:
                chosen.append(ch)
                last = pos[j]
                break
    return "".join(chosen)


def count_mixed_substrings(s: str) -> int:
    """Number of substrings holding both an 'o' and a non-'o' character."""
    n = len(s)
    upcoming: list[int | None] = [None, None]
    total = 0
    for i in range(n - 1, -1, -1):
        kind = 0 if s[i] == "o" else 1
        other = upcoming[kind ^ 1]
        if other is not None:
            total += n - other
        upcoming[kind] = i
    return total


def enumerate_topological_orders(
    n: int, edges: Iterable[tuple[int, int]], k: int
) -> list[list[int]] | None:
    """``k`` distinct topological orders of a digraph, or None if it has fewer."""
    adj: list[list[int]] = [[] for _ in range(n)]
    indeg = [0] * n
    for a, b in edges:
        adj[a].append(b)
        indeg[b] += 1
    queue = [v for v in range(n) if indeg[v] == 0]
    current = [0] * n
    orders: list[list[int]] = []
    # Each frame: [index in queue being tried, vertex taken at this depth or None].
    frames: list[list] = []

    def descend(depth: int) -> bool | None:
        if depth == n:
            orders.append(current.copy())
            return True
        if not queue:
            return False
        frames.append([len(queue) - 1, None])
        return None

    result = descend(0)
    while frames and result is not False:
        frame = frames[-1]
        if frame[1] is not None:
            u = frame[1]
            for v in adj[u]:
                indeg[v] += 1
                if indeg[v] == 1:
                    queue.pop()
            queue.insert(frame[0], u)
            frame[1] = None
            frame[0] -= 1
        i = frame[0]
        if i < 0 or len(orders) == k:
            frames.pop()
            result = True
            continue
        depth = len(frames) - 1
        u = queue.pop(i)
        current[depth] = u
        for v in adj[u]:
            indeg[v] -= 1
            if indeg[v] == 0:
                queue.append(v)
        frame[1] = u
        result = descend(depth + 1)
    return orders if len(orders) == k else None


def ball_painting_order(pairs: Sequence[tuple[int, int]]) -> list[int] | None:
    """Order to paint all balls, where ball ``i`` may be painted while ball
    ``pairs[i][0]`` or ``pairs[i][1]`` is still unpainted; None if impossible."""
    pairs = list(pairs)
    n = len(pairs)
    children: list[list[int]] = [[] for _ in range(n)]
    seeds = []
    for i, (a, b) in enumerate(pairs):
        for target in (a, b):
            if target != i:
                children[target].append(i)
            else:
                seeds.append(i)
    if not seeds:
        return None
    used = [False] * n
    order: list[int] = []
    for seed in sorted(set(seeds)):
        if used[seed]:
            continue
        used[seed] = True
        order.append(seed)
        stack = [iter(children[seed])]
        while stack:
            for v in stack[-1]:
                if not used[v]:
                    used[v] = True
                    order.append(v)
                    stack.append(iter(children[v]))
                    break
            else:
                stack.pop()
    if len(order) != n:
        return None
    order.reverse()
    return order