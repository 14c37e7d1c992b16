import pytest

from tinynet.matrix import Matrix


def test_constructor():
    assert Matrix().rows == []
    assert len(Matrix([[15, 20], [20, 25]])) == 2


def test_rows_is_a_copy():
    mat = Matrix([[1, 2]])
    rows = mat.rows
    rows[0][0] = 99
    assert mat.rows == [[1.0, 2.0]]


def test_add_row_and_iter():
    mat = Matrix()
    mat.add_row([1, 2])
    mat.add_row([3, 4])
    assert list(mat) == [[1.0, 2.0], [3.0, 4.0]]
    assert len(mat) == 2


def test_dot():
    assert Matrix.dot([1, 2], [3, 4]) == 11.0
    with pytest.raises(ValueError):
        Matrix.dot([1, 2], [3, 4, 5])
    assert Matrix.dot([], []) == 0.0


def test_matvec():
    mat = Matrix([[1, 2], [3, 4]])
    assert mat.matvec([5, 6]) == [17, 39]
    with pytest.raises(ValueError):
        mat.matvec([5, 6, 7])
    assert Matrix().matvec([]) == []


def test_transpose():
    mat = Matrix([[1, 2, 3], [4, 5, 6]])
    assert mat.transpose() == Matrix([[1, 4], [2, 5], [3, 6]])
    assert Matrix().transpose() == Matrix()


def test_transpose_twice_is_identity():
    mat = Matrix([[1, 2, 3], [4, 5, 6]])
    assert mat.transpose().transpose() == mat


def test_apply():
    mat = Matrix([[-1000, 0], [1, 1000]])
    mat.apply(lambda x: max(0.0, x))
    assert mat == Matrix([[0, 0], [1, 1000]])


def test_matmul():
    mat1 = Matrix([[1, 2], [3, 4]])
    mat2 = Matrix([[5, 6], [7, 8]])
    assert mat1 * mat2 == Matrix([[19, 22], [43, 50]])
    with pytest.raises(ValueError):
        mat1 * Matrix([[5], [6], [7]])
    assert Matrix() * Matrix([[5], [6], [7]]) == Matrix()


def test_scalar_multiplication():
    mat = Matrix([[1, 2], [3, 4]])
    assert mat * 2 == Matrix([[2, 4], [6, 8]])
    assert 2 * mat == mat * 2
    assert mat == Matrix([[1, 2], [3, 4]])


def test_matadd():
    mat1 = Matrix([[1, 2], [3, 4]])
    mat2 = Matrix([[5, 6], [7, 8]])
    assert mat1 + mat2 == Matrix([[6, 8], [10, 12]])
    with pytest.raises(ValueError):
        mat1 + Matrix()
    assert Matrix() + Matrix() == Matrix()


def test_matadd_row_mismatch():
    with pytest.raises(ValueError):
        Matrix([[1, 2]]) + Matrix([[1]])


def test_matsub():
    mat1 = Matrix([[5, 6], [7, 8]])
    mat2 = Matrix([[1, 2], [3, 4]])
    assert mat1 - mat2 == Matrix([[4, 4], [4, 4]])
    with pytest.raises(ValueError):
        mat1 - Matrix()
    assert Matrix() - Matrix() == Matrix()


def test_add_then_sub_round_trip():
    mat1 = Matrix([[5, 6], [7, 8]])
    mat2 = Matrix([[1, 2], [3, 4]])
    assert (mat1 + mat2) - mat2 == mat1


def test_equality_with_other_type():
    assert (Matrix([[1]]) == [[1]]) is False