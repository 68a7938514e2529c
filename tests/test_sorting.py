from collections import Counter

import pytest

from algodrills.sorting import (
    Summary,
    binary_search,
    find_seven_dwarfs,
    mean_rounded,
    median,
    membership,
    mode,
    smallest_seven,
    sort_ascending,
    sort_chars_desc,
    sort_members,
    sort_points,
    sort_words,
    summarize,
    value_range,
)


def test_sort_members_is_stable_by_age():
    members = [(21, "Junkyu"), (21, "Dohyun"), (20, "Sunyoung")]
    assert sort_members(members) == [members[2], members[0], members[1]]


def test_sort_words_orders_by_length_then_text_without_duplicates():
    words = ["but", "i", "wont", "hesitate", "no", "more", "no", "it", "cannot", "wait", "im", "yours"]
    result = sort_words(words)
    assert len(result) == len(set(result))
    assert set(result) == set(words)
    for shorter, longer in zip(result, result[1:]):
        assert len(shorter) <= len(longer)
        if len(shorter) == len(longer):
            assert shorter < longer


def test_binary_search_finds_members_and_rejects_others():
    values = [1, 2, 3, 4, 5]
    assert all(binary_search(values, v) for v in values)
    assert not binary_search(values, 7)
    assert not binary_search([], 1)


def test_membership_matches_presence():
    values = [4, 1, 5, 2, 3]
    queries = [1, 3, 7, 9, 5]
    assert membership(values, queries) == [q in values for q in queries]


def test_sort_ascending_invariants():
    values = [5, 2, 3, 4, 1, 3]
    result = sort_ascending(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(values)


def test_sort_chars_desc_invariants():
    text = "2143"
    result = sort_chars_desc(text)
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(text)


def test_sort_points_orders_by_x_then_y():
    points = [(3, 4), (1, 1), (1, -1), (2, 2), (3, 3)]
    result = sort_points(points)
    assert Counter(result) == Counter(points)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_mean_rounded_basic():
    assert mean_rounded([1, 3, 8, -2, 2]) == 2


@pytest.mark.parametrize("values, expected", [([2, 3], 3), ([-2, -3], -3), ([4], 4)])
def test_mean_rounded_halves_go_away_from_zero(values, expected):
    assert mean_rounded(values) == expected


def test_median_takes_middle():
    assert median([5, 1, 3]) == 3


def test_mode_picks_second_smallest_on_tie():
    assert mode([1, 1, 2, 2, 3]) == 2
    assert mode([1, 1, 2]) == 1
    assert mode([4]) == 4


def test_value_range():
    assert value_range([9, 0]) == 9
    assert value_range([7]) == 0


def test_summarize_agrees_with_parts():
    values = [1, 3, 8, -2, 2]
    assert summarize(values) == Summary(
        mean=mean_rounded(values),
        median=median(values),
        mode=mode(values),
        spread=value_range(values),
    )


@pytest.mark.parametrize("func", [mean_rounded, median, mode, value_range, summarize])
def test_statistics_reject_empty_input(func):
    with pytest.raises(ValueError):
        func([])


def test_smallest_seven_invariants():
    heights = [20, 7, 23, 19, 10, 15, 25, 8, 13]
    result = smallest_seven(heights)
    assert len(result) == 7
    assert all(a <= b for a, b in zip(result, result[1:]))
    excluded = Counter(heights) - Counter(result)
    assert all(h >= result[-1] for h in excluded.elements())


def test_find_seven_dwarfs_keeps_order_and_total():
    heights = [20, 7, 23, 19, 10, 15, 25, 8, 13]
    result = find_seven_dwarfs(heights)
    assert len(result) == 7
    assert sum(result) == 100
    positions = [heights.index(h) for h in result]
    assert positions == sorted(positions)


def test_find_seven_dwarfs_without_solution():
    with pytest.raises(ValueError):
        find_seven_dwarfs([1, 2, 3, 4, 5, 6, 7, 8, 9])