import random

import pytest

from contestlib.problems.tree_dp import count_mixed_partitions


def _brute(labels, edges):
    n = len(labels)
    total = 0
    for mask in range(1 << len(edges)):
        parent = list(range(n))

        def find(x):
            while parent[x] != x:
                x = parent[x]
            return x

        for i, (u, v) in enumerate(edges):
            if mask >> i & 1:
                parent[find(u)] = find(v)
        groups = {}
        for i, ch in enumerate(labels):
            groups.setdefault(find(i), set()).add(ch)
        if all(g == {"a", "b"} for g in groups.values()):
            total += 1
    return total


@pytest.mark.parametrize("seed", range(8))
def test_matches_enumeration(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 9)
    labels = [rng.choice("ab") for _ in range(n)]
    edges = [(rng.randrange(i), i) for i in range(1, n)]
    assert count_mixed_partitions(labels, edges) == _brute(labels, edges)


def test_single_pair_has_one_partition():
    assert count_mixed_partitions("ab", [(0, 1)]) == 1


def test_single_vertex_cannot_be_mixed():
    assert count_mixed_partitions("a", []) == 0


def test_uniform_labels_give_nothing():
    assert count_mixed_partitions("bbbb", [(0, 1), (1, 2), (1, 3)]) == 0


def test_rejects_unknown_label():
    with pytest.raises(ValueError):
        count_mixed_partitions("ac", [(0, 1)])


def test_rejects_empty_tree():
    with pytest.raises(ValueError):
        count_mixed_partitions("", [])