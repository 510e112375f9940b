from cbcbind.matrix import to_triplet, check_dimensions, as_vector
from cbcbind import ShapeError, ValidationError
from scipy.sparse import coo_matrix, csr_matrix
import numpy as np
import pytest

def test_triplet_passes_through():
    # unsorted, with a duplicate entry
    mat = coo_matrix(([1.0, 2.0, 3.0], ([1, 0, 1], [2, 0, 2])), shape=(2, 3))
    assert to_triplet(mat) is mat
    assert list(to_triplet(mat).row) == [1, 0, 1]
    assert to_triplet(mat).nnz == 3

def test_dense_input():
    mat = to_triplet([[1, 0, 2], [0, 0, 3]])
    assert isinstance(mat, coo_matrix)
    assert mat.shape == (2, 3)
    assert mat.nnz == 3
    assert sorted(zip(mat.row, mat.col, mat.data)) == [(0, 0, 1.0), (0, 2, 2.0), (1, 2, 3.0)]
    assert np.array_equal(mat.toarray(), [[1, 0, 2], [0, 0, 3]])

def test_other_input():
    assert to_triplet(np.matrix([[1, 1]])).shape == (1, 2)
    assert to_triplet([1, 1]).shape == (1, 2)
    dense = np.array([[0, 1.5], [2, 0]])
    mat = to_triplet(csr_matrix(dense))
    assert isinstance(mat, coo_matrix)
    assert np.array_equal(mat.toarray(), dense)
    with pytest.raises(ShapeError):
        to_triplet(np.zeros((2, 2, 2)))

def test_check_dimensions():
    mat = to_triplet([[1, 1, 0], [0, 1, 1]])
    check_dimensions(mat, obj=[1, 2, 3], col_lb=[0, 0, 0], row_ub=[1, 1])
    with pytest.raises(ShapeError, match="col_lb"):
        check_dimensions(mat, obj=[1, 2, 3], col_lb=[0, 0], row_ub=[1, 1])
    with pytest.raises(ShapeError, match="row_lb"):
        check_dimensions(mat, obj=[1, 2, 3], row_lb=[0, 0, 0], row_ub=[1, 1])

def test_as_vector():
    assert as_vector([1, 2], "obj").dtype == float
    assert list(as_vector([-np.inf, 1], "row_lb")) == [-np.inf, 1.0]
    assert len(as_vector(3, "obj")) == 1
    with pytest.raises(ValidationError, match="obj"):
        as_vector(["a", "b"], "obj")
    with pytest.raises(ShapeError):
        as_vector([[1, 2]], "obj")
