import pytest

from algodrills.sequences import (
    EmptyArrayError,
    apply_ac,
    format_int_array,
    is_balanced,
    is_palindrome,
    is_vps,
    josephus,
    last_card,
    next_greater,
    parse_int_array,
    print_order,
    running_medians,
    stack_sequence,
    tower_receivers,
    zero_sum,
)


def _replay(operations):
    stack, popped, next_value = [], [], 1
    for op in operations:
        if op == "+":
            stack.append(next_value)
            next_value += 1
        else:
            popped.append(stack.pop())
    return popped


def test_parse_and_format_round_trip():
    values = [1, 22, 333]
    assert parse_int_array(format_int_array(values)) == values
    assert parse_int_array("[]") == []
    assert format_int_array([]) == "[]"


def test_apply_ac_operations():
    values = [1, 2, 3, 4]
    assert apply_ac("D", values) == values[1:]
    assert apply_ac("R", values) == values[::-1]
    assert apply_ac("RR", values) == values
    assert apply_ac("RD", values) == values[::-1][1:]
    assert apply_ac("DDDD", values) == []


def test_apply_ac_delete_on_empty_raises():
    with pytest.raises(EmptyArrayError):
        apply_ac("DD", [1])
    with pytest.raises(IndexError):
        apply_ac("D", [])


def test_is_balanced():
    assert is_balanced("So when I die (the [first] I will see in (heaven) a score list).")
    assert is_balanced("([ (([( [ ] ) ( ) (( ))] )) ]).")
    assert not is_balanced("Help( I[m being held prisoner in a fortune cookie factory)].")
    assert not is_balanced("(")
    assert is_balanced(" .")


def test_is_vps():
    assert is_vps("(()())((()))")
    assert not is_vps("(())())")
    assert not is_vps("(a)")
    assert is_vps("")


def test_next_greater():
    assert next_greater([1, 2, 3]) == [2, 3, -1]
    assert next_greater([3, 2, 1]) == [-1, -1, -1]
    assert next_greater([]) == []


def test_stack_sequence_replays_to_targets():
    targets = [4, 3, 6, 8, 7, 5, 2, 1]
    ops = stack_sequence(targets)
    assert _replay(ops) == targets
    assert ops.count("+") == max(targets)
    assert ops.count("-") == len(targets)


def test_stack_sequence_impossible():
    with pytest.raises(ValueError):
        stack_sequence([1, 2, 5, 3, 4])


def test_tower_receivers():
    assert tower_receivers([6, 9, 5, 7, 4]) == [0, 0, 2, 2, 4]
    assert tower_receivers([1, 1]) == [0, 1]


def test_josephus():
    assert josephus(7, 3) == [3, 6, 2, 7, 5, 1, 4]
    order = josephus(10, 4)
    assert sorted(order) == list(range(1, 11))
    assert josephus(5, 1) == [1, 2, 3, 4, 5]
    with pytest.raises(ValueError):
        josephus(0, 2)


def test_zero_sum():
    assert zero_sum([3, 0, 4, 0]) == 0
    assert zero_sum([4, 0, 9]) == 9
    assert zero_sum([0, 5]) == 5


def test_last_card():
    assert last_card(1) == 1
    assert last_card(2) == 2
    assert last_card(16) == 16
    with pytest.raises(ValueError):
        last_card(0)


def test_print_order():
    assert print_order([1, 1, 9, 1, 1, 1], 0) == 5
    assert print_order([1, 1, 1], 2) == 3
    assert print_order([1, 2, 3], 2) == 1
    with pytest.raises(ValueError):
        print_order([1, 2], 5)
    with pytest.raises(ValueError):
        print_order([0, 2], 0)


def test_is_palindrome():
    assert is_palindrome("121")
    assert is_palindrome("12421")
    assert not is_palindrome("1231")
    assert is_palindrome("7")


def test_running_medians_invariants():
    values = [1, 5, 2, 10, -99, 7, 5, 3, 3, 8]
    medians = running_medians(values)
    assert len(medians) == len(values)
    assert medians[0] == values[0]
    for size, median in enumerate(medians, start=1):
        prefix = values[:size]
        assert median in prefix
        assert sum(v < median for v in prefix) <= (size - 1) // 2 < sum(v <= median for v in prefix)