import logging

import numpy as np

from .arguments import compile_arguments
from .config import SolverConfig
from .engine import CbcEngine
from .errors import ValidationError
from .matrix import as_vector, check_dimensions, to_triplet
from .solverresult import SolverResult

logger = logging.getLogger(__name__)


class MILP:
    """
    A MILP is given by an objective function, a constraint matrix and bounds for rows and columns

    .. math::

        \\min_x/\\max_x\\ c^T x \\quad \\text{ s.t. } \\quad r_l \\leq Ax \\leq r_u,\\
        l \\leq x \\leq u,\\ x_i \\in \\mathbb{Z},\\ \\forall i \\in I.

    .. code-block::

        # max x + 2y s.t. x + y <= 1, x,y in {0,1}. optimal result should be x_opt=[0,1].
        milp = MILP.from_coefficients(
            obj=[1, 2], mat=[[1, 1]], row_ub=[1], col_lb=[0, 0], col_ub=[1, 1],
            is_integer=[True, True], objective="max")

        result = milp.solve(cbc_args={"sec": 10})
        print(result)

    Instances are built by `from_coefficients`, which validates all inputs.
    """
    def __init__(self, obj, mat, row_lb, row_ub, col_lb, col_ub, integer_indices, maximize):
        self.obj = obj
        self.mat = mat
        self.row_lb = row_lb
        self.row_ub = row_ub
        self.col_lb = col_lb
        self.col_ub = col_ub
        self.integer_indices = integer_indices
        self.maximize = maximize

    @property
    def nrow(self):
        return self.mat.shape[0]

    @property
    def ncol(self):
        return self.mat.shape[1]

    @classmethod
    def from_coefficients(cls, obj, mat, row_ub, row_lb=None, col_lb=None, col_ub=None,
                          is_integer=None, objective="min"):
        """Returns the MILP for the given coefficients. Bounds that are not given are unbounded.

        :param obj: coefficients of the objective function, one per column
        :type obj: List[float]
        :param mat: the constraint matrix. Anything `matrix.to_triplet` accepts.
        :type mat: :math:`M \\times N`-Matrix
        :param row_ub: upper bound for every row
        :type row_ub: List[float]
        :param row_lb: lower bound for every row, defaults to -inf
        :type row_lb: List[float], optional
        :param col_lb: lower bound for every column, defaults to -inf
        :type col_lb: List[float], optional
        :param col_ub: upper bound for every column, defaults to inf
        :type col_ub: List[float], optional
        :param is_integer: for every column whether it is an integer variable, defaults to all False
        :type is_integer: List[bool], optional
        :param objective: "min" or "max", defaults to "min"
        :type objective: str, optional
        :raises ShapeError: if a vector does not fit the dimensions of `mat`
        :raises ValidationError: if a vector is not numeric or `objective` is invalid
        :rtype: milp.MILP
        """
        if objective not in ["min", "max"]:
            raise ValidationError("objective must be either 'min' or 'max', got %r" % (objective,))

        obj = as_vector(obj, "obj")
        row_ub = as_vector(row_ub, "row_ub")
        mat = to_triplet(mat)

        row_lb = np.full(len(row_ub), -np.inf) if row_lb is None else as_vector(row_lb, "row_lb")
        col_lb = np.full(len(obj), -np.inf) if col_lb is None else as_vector(col_lb, "col_lb")
        col_ub = np.full(len(obj), np.inf) if col_ub is None else as_vector(col_ub, "col_ub")
        is_integer = np.zeros(len(obj), dtype=bool) if is_integer is None \
            else np.atleast_1d(np.asarray(is_integer, dtype=bool))

        check_dimensions(mat, obj=obj, col_lb=col_lb, col_ub=col_ub, is_integer=is_integer,
                         row_ub=row_ub, row_lb=row_lb)

        integer_indices = [int(idx) for idx in np.flatnonzero(is_integer)]
        return cls(obj, mat, row_lb, row_ub, col_lb, col_ub, integer_indices, objective == "max")

    def solve(self, cbc_args=None, config=None, engine=None):
        """Solves this problem and returns the result.

        :param cbc_args: CBC options of this call, placed after the options of `config`.
            See `arguments.parse_options`.
        :type cbc_args: Union[Dict[str,object], Iterable], optional
        :param config: settings of this solve, defaults to `SolverConfig()`
        :type config: config.SolverConfig, optional
        :param engine: the engine that solves the problem, defaults to `CbcEngine()`
        :type engine: engine.Engine, optional
        :raises OptionError: if an option name is invalid. CBC is not run in this case.
        :return: Result.
        :rtype: solverresult.SolverResult
        """
        if config is None:
            config = SolverConfig()
        arguments = compile_arguments(config.merge(cbc_args))
        if engine is None:
            engine = CbcEngine()

        logger.debug("solving %dx%d problem (%d integer columns) with %s",
                     self.nrow, self.ncol, len(self.integer_indices), engine)
        record = engine.solve(self, arguments, config)
        result = SolverResult.from_record(record)
        logger.info("%s finished with status %s", engine, result.status)
        return result

    def __repr__(self):
        return "MILP(nrow=%d, ncol=%d, integer_indices=%s, maximize=%s)" % (
            self.nrow, self.ncol, self.integer_indices, self.maximize)


def cbc_solve(obj, mat, row_ub, row_lb=None, col_lb=None, col_ub=None, is_integer=None,
              objective="min", cbc_args=None, config=None, engine=None):
    """Solves a mixed integer linear program with CBC. See `MILP.from_coefficients` and
    `MILP.solve` for the parameters.

    .. code-block::

        # max x + 2y s.t. x + y <= 1, x,y integer and non-negative
        result = cbc_solve(obj=[1, 2], mat=[[1, 1]], row_ub=[1], col_lb=[0, 0],
                           is_integer=[True, True], objective="max")
        result.status           # "optimal"
        result.column_solution  # array([0., 1.])
        result.objective_value  # 2.0

    :rtype: solverresult.SolverResult
    """
    milp = MILP.from_coefficients(obj, mat, row_ub, row_lb=row_lb, col_lb=col_lb, col_ub=col_ub,
                                  is_integer=is_integer, objective=objective)
    return milp.solve(cbc_args=cbc_args, config=config, engine=engine)
