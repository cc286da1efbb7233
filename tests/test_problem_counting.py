import itertools

import pytest

from contestlib.problems.counting import (
    count_atcoder_subsequences,
    count_avoiding_values,
    count_box_triples,
    count_colorings,
    count_spaced_selections,
    count_stair_climbs,
    count_switch_patterns,
    count_triples_mod46,
)


def _brute_subsequences(s, word):
    return sum(
        1
        for idx in itertools.combinations(range(len(s)), len(word))
        if "".join(s[i] for i in idx) == word
    )


def test_atcoder_sample():
    assert count_atcoder_subsequences("attcordeer") == 4


@pytest.mark.parametrize("s", ["", "atcoder", "aattccooddeerr", "redocta", "atcoderatcoder"])
def test_atcoder_matches_enumeration(s):
    assert count_atcoder_subsequences(s) == _brute_subsequences(s, "atcoder")


def test_atcoder_result_is_reduced():
    assert 0 <= count_atcoder_subsequences("a" * 200 + "tcoder" * 200) < 10**9 + 7


@pytest.mark.parametrize("n", [1, 2, 5, 8])
def test_spaced_selections_enumeration(n):
    expected = []
    for k in range(1, n + 1):
        cnt = 0
        for r in range(1, n + 1):
            for sub in itertools.combinations(range(1, n + 1), r):
                if all(y - x >= k for x, y in zip(sub, sub[1:])):
                    cnt += 1
        expected.append(cnt)
    assert count_spaced_selections(n) == expected


def test_spaced_selections_first_is_all_subsets():
    result = count_spaced_selections(20)
    assert result[0] == 2**20 - 1
    assert result[-1] == 20


def test_spaced_selections_negative():
    with pytest.raises(ValueError):
        count_spaced_selections(-1)


def test_stair_climbs_sample():
    assert count_stair_climbs(5, 2) == 8


def test_stair_climbs_recurrence():
    for l in (2, 3, 4):
        values = [count_stair_climbs(n, l) for n in range(15)]
        for n in range(l, 15):
            assert values[n] == values[n - 1] + values[n - l]


def test_stair_climbs_l1_doubles():
    assert count_stair_climbs(10, 1) == 2**10


def test_stair_climbs_bad_length():
    with pytest.raises(ValueError):
        count_stair_climbs(5, 0)


@pytest.mark.parametrize("n,k", [(1, 3), (2, 3), (3, 4), (4, 3), (5, 4), (6, 2)])
def test_colorings_enumeration(n, k):
    expected = sum(
        1
        for seq in itertools.product(range(k), repeat=n)
        if all(seq[i] != seq[i - 1] for i in range(1, n))
        and all(seq[i] != seq[i - 2] for i in range(2, n))
    )
    assert count_colorings(n, k) == expected


def test_colorings_huge_is_reduced():
    assert 0 <= count_colorings(10**18, 10**9) < 10**9 + 7


def test_colorings_invalid_n():
    with pytest.raises(ValueError):
        count_colorings(0, 3)


def _brute_switches(m, switches, target):
    goal = sum(1 << i for i, t in enumerate(target) if t)
    masks = [sum(1 << c for c in sw) for sw in switches]
    cnt = 0
    for choice in itertools.product((0, 1), repeat=len(masks)):
        acc = 0
        for on, mask in zip(choice, masks):
            if on:
                acc ^= mask
        cnt += acc == goal
    return cnt


@pytest.mark.parametrize(
    "m,switches,target",
    [
        (3, [[0, 1], [1, 2], [0, 2]], [1, 1, 0]),
        (3, [[0, 1], [1, 2], [0, 2]], [1, 1, 1]),
        (4, [[0], [0], [1, 3], [2], [3]], [1, 0, 1, 1]),
        (2, [[1], [1]], [1, 0]),
        (3, [[2, 0], [1], [0, 1, 2], [2]], [0, 1, 1]),
    ],
)
def test_switch_patterns_enumeration(m, switches, target):
    assert count_switch_patterns(m, switches, target) == _brute_switches(m, switches, target)


def test_switch_patterns_errors():
    with pytest.raises(ValueError):
        count_switch_patterns(2, [[2]], [0, 0])
    with pytest.raises(ValueError):
        count_switch_patterns(2, [[0]], [0])


@pytest.mark.parametrize("d,a", [(3, [1, 2]), (4, [3, 5, 12]), (2, [0]), (5, [7, 9, 17, 30])])
def test_avoiding_values_enumeration(d, a):
    expected = sum(1 for x in range(1 << d) if all(x & v for v in a))
    assert count_avoiding_values(d, a) == expected


def test_avoiding_values_no_constraints():
    assert count_avoiding_values(6, []) == 64


@pytest.mark.parametrize("k", [1, 4, 12, 30, 64, 360, 997])
def test_box_triples_enumeration(k):
    expected = sum(
        1
        for a in range(1, k + 1)
        for b in range(a, k + 1)
        if k % (a * b) == 0 and k // (a * b) >= b
    )
    assert count_box_triples(k) == expected


def test_box_triples_invalid():
    with pytest.raises(ValueError):
        count_box_triples(0)


def test_triples_mod46_enumeration():
    a, b, c = [10, 13, 93, 46], [1, 45, 47, 92], [35, 0, 46, 12, 80]
    expected = sum(
        1 for x, y, z in itertools.product(a, b, c) if (x + y + z) % 46 == 0
    )
    assert count_triples_mod46(a, b, c) == expected


def test_triples_mod46_all_multiples():
    assert count_triples_mod46([46, 92], [0], [46, 138, 184]) == 6