import logging

import numpy as np
from scipy.sparse import coo_matrix, issparse

from .errors import ShapeError, ValidationError

logger = logging.getLogger(__name__)


def to_triplet(mat):
    """Casts a matrix-like object as a `scipy.sparse.coo_matrix`, i.e. as parallel
    arrays of row indices, column indices and values (all indices 0-based).
    A `coo_matrix` is returned as it is: its indices are neither sorted nor
    checked and duplicate entries are kept. Other sparse formats are converted,
    dense input is converted after dropping its zero entries.
    If the input is 1d, it is treated as a (:math:`1 \\times N`) matrix.

    :param mat: Input array/list/sparse matrix.
    :type mat: 1d or 2d-object type
    :return: Resulting coo_matrix.
    :rtype: scipy.sparse.coo_matrix
    """
    if isinstance(mat, coo_matrix):
        return mat
    if issparse(mat):
        logger.debug("converting %s matrix to triplet form", mat.format)
        return coo_matrix(mat)

    arr = np.asarray(mat, dtype=float)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ShapeError("constraint matrix must be 1d or 2d, got %d dimensions" % arr.ndim)
    logger.debug("converting dense %dx%d matrix to triplet form", *arr.shape)
    return coo_matrix(arr)


def as_vector(values, name):
    """Returns `values` as a 1d float array.

    :param values: numbers or booleans
    :type values: List[float]
    :param name: name of the argument, used in error messages
    :type name: str
    :rtype: np.ndarray
    """
    arr = np.asarray(values)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1:
        raise ShapeError("%s must be a vector, got shape %s" % (name, arr.shape))
    if arr.size > 0 and arr.dtype.kind not in "biuf":
        raise ValidationError("%s must be numeric, got dtype %s" % (name, arr.dtype))
    return arr.astype(float)


def check_dimensions(mat, **vectors):
    """Checks that every per-column vector has one entry per column of `mat`
    and every per-row vector one entry per row. Per-row vectors are the
    keyword arguments whose name starts with ``row_``, all others are per-column.

    .. code-block::

        check_dimensions(A, obj=obj, col_lb=col_lb, col_ub=col_ub,
                         is_integer=is_integer, row_lb=row_lb, row_ub=row_ub)

    :param mat: the constraint matrix
    :type mat: scipy.sparse.coo_matrix
    :raises ShapeError: naming the first vector whose length does not match.
    """
    nrow, ncol = mat.shape
    for name, vector in vectors.items():
        expected = nrow if name.startswith("row_") else ncol
        what = "rows" if name.startswith("row_") else "columns"
        if len(vector) != expected:
            raise ShapeError(
                "length of %s is %d, but the constraint matrix has %d %s" % (name, len(vector), expected, what))
