import itertools
import random

from contestlib.sequences import cartesian_tree, lis


def _longest_ending_at(a, i):
    best = 1
    for size in range(1, i + 1):
        for chosen in itertools.combinations(range(i), size):
            seq = [a[j] for j in chosen] + [a[i]]
            if all(x < y for x, y in zip(seq, seq[1:])):
                best = max(best, len(seq))
    return best


def test_lis_against_exhaustive_search():
    rng = random.Random(2)
    for _ in range(30):
        n = rng.randint(1, 7)
        a = [rng.randrange(n) for _ in range(n)]
        assert lis(a) == [_longest_ending_at(a, i) for i in range(n)]


def test_lis_empty():
    assert lis([]) == []


def _in_order(children, node):
    left = [c for c in children[node] if c < node]
    right = [c for c in children[node] if c > node]
    out = []
    for c in left:
        out.extend(_in_order(children, c))
    out.append(node)
    for c in right:
        out.extend(_in_order(children, c))
    return out


def test_cartesian_tree_invariants():
    rng = random.Random(9)
    for _ in range(30):
        n = rng.randint(1, 12)
        a = [rng.randint(0, 5) for _ in range(n)]
        children, root = cartesian_tree(a)
        assert root == a.index(min(a))
        assert _in_order(children, root) == list(range(n))
        for p, kids in enumerate(children):
            assert len(kids) <= 2
            for c in kids:
                assert a[c] >= a[p]


def test_cartesian_tree_empty():
    children, root = cartesian_tree([])
    assert children == []
    assert root is None