from hypothesis import given
from hypothesis import strategies as st

from algodrills.grids import wave_order


def test_source_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert wave_order(matrix) == [1, 4, 7, 8, 5, 2, 3, 6, 9]


def test_empty():
    assert wave_order([]) == []


def test_single_row_is_unchanged():
    assert wave_order([[4, 5, 6, 7]]) == [4, 5, 6, 7]


def test_single_column_reads_down():
    assert wave_order([[4], [5], [6]]) == [4, 5, 6]


@st.composite
def grids(draw):
    rows = draw(st.integers(min_value=1, max_value=6))
    cols = draw(st.integers(min_value=1, max_value=6))
    return [
        draw(st.lists(st.integers(), min_size=cols, max_size=cols))
        for _ in range(rows)
    ]


@given(grids())
def test_visits_every_cell_once(matrix):
    result = wave_order(matrix)
    flat = [item for row in matrix for item in row]
    assert sorted(result) == sorted(flat)


@given(grids())
def test_column_directions(matrix):
    result = wave_order(matrix)
    rows = len(matrix)
    assert result[:rows] == [row[0] for row in matrix]
    if len(matrix[0]) > 1:
        assert result[rows : 2 * rows] == [row[1] for row in reversed(matrix)]