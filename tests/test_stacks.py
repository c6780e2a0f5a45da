import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.stacks import (
    delete_middle,
    insert_at_bottom,
    next_smaller_elements,
    reverse_stack,
)


def test_delete_middle_source_example():
    stack = [1, 2, 3, 4, 5]
    removed = delete_middle(stack)
    assert removed == 3
    assert stack == [1, 2, 4, 5]


def test_delete_middle_empty():
    with pytest.raises(IndexError):
        delete_middle([])


def test_delete_middle_single():
    stack = [9]
    assert delete_middle(stack) == 9
    assert stack == []


@given(st.lists(st.integers(), min_size=1))
def test_delete_middle_removes_one_keeping_order(data):
    stack = list(data)
    removed = delete_middle(stack)
    assert len(stack) == len(data) - 1
    assert sorted(stack + [removed]) == sorted(data)
    remaining = iter(data)
    assert all(item in remaining for item in stack)


@given(st.lists(st.integers()), st.integers())
def test_insert_at_bottom(data, element):
    stack = list(data)
    insert_at_bottom(stack, element)
    assert stack[0] == element
    assert stack[1:] == data


@given(st.lists(st.integers()))
def test_reverse_stack(data):
    stack = list(data)
    reverse_stack(stack)
    assert stack == list(reversed(data))
    reverse_stack(stack)
    assert stack == data


def test_next_smaller_source_example():
    assert next_smaller_elements([4, 5, 2, 10, 8]) == [2, 2, -1, 8, -1]


def test_next_smaller_empty():
    assert next_smaller_elements([]) == []


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1))
def test_next_smaller_invariants(data):
    result = next_smaller_elements(data)
    assert len(result) == len(data)
    assert result[-1] == -1
    for index, (value, smaller) in enumerate(zip(data, result)):
        later = data[index + 1 :]
        if smaller == -1:
            assert all(item >= value for item in later)
        else:
            assert smaller < value
            assert smaller in later
        if later and later[0] < value:
            assert smaller == later[0]