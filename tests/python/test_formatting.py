import pytest

from pymatrix import Matrix


def test_repr_shows_data():
    assert repr(Matrix([[1, 2], [3, 4], [5, 6]])) == "Matrix3x2([[1, 2], [3, 4], [5, 6]])"


def test_str_grid_right_aligns_columns():
    s = str(Matrix([[1, 2.5], [True, 40]]))
    assert s.splitlines() == [
        "Matrix2x2(shape=(2, 2))",
        "[",
        " [   1 2.5]",
        " [True  40]",
        "]",
    ]


def test_format_truncates_with_edge_items():
    m = Matrix([[1, 2, 1], [3, 4, 1], [1, 5, 6]])
    assert m.format(edge_items=1).splitlines() == [
        "Matrix3x3(shape=(3, 3))",
        "[",
        " [1 ... 1]",
        " ...",
        " [1 ... 6]",
        "]",
    ]
    # The default shows everything for small matrices.
    assert "..." not in str(m)


def test_str_truncates_large_matrices():
    m = Matrix([[i * 10 + j for j in range(10)] for i in range(10)])
    lines = str(m).splitlines()
    assert lines[0] == "Matrix10x10(shape=(10, 10))"
    assert lines[2] == " [ 0  1  2  3 ...  6  7  8  9]"
    assert lines[6] == " ..."
    assert len(lines) == 2 + 8 + 1 + 1


@pytest.mark.parametrize("bad", [0, -2, 1.5, True])
def test_format_validates_edge_items(bad):
    with pytest.raises(ValueError):
        Matrix([[1]]).format(edge_items=bad)
