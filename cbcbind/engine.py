"""Engines solve a `milp.MILP` given the compiled CBC argument tokens.

`CbcEngine` runs the CBC executable that ships with PuLP. The problem is
exported as an MPS file by PuLP, the ``problem`` placeholder of the argument
tokens is replaced by the executable and that file, and CBC is asked to write
its solution file after solving."""
from abc import ABC, abstractmethod
import logging
import math
import os
import shutil
import subprocess
import tempfile

import numpy as np
import pulp

from .status import INDICATORS

logger = logging.getLogger(__name__)

# first line of a CBC solution file -> indicator
_cbc_status = [
    ("Optimal", "is_proven_optimal"),
    ("Unbounded", "is_proven_dual_infeasible"),
    ("Infeasible", "is_proven_infeasible"),
    ("Integer infeasible", "is_proven_infeasible"),
    ("Stopped on difficulties", "is_abandoned"),
    ("Stopped on ctrl-c", "is_abandoned"),
    ("Stopped on iterations", "is_iteration_limit_reached"),
    ("Stopped on time", "is_seconds_limit_reached"),
]

# the solution file reports node and solution limits as "Stopped on iterations",
# only the "Result - " line of CBC's console output tells the limits apart
_cbc_result = [
    ("Result - Stopped on node", "is_node_limit_reached"),
    ("Result - Stopped on solution", "is_solution_limit_reached"),
    ("Result - Stopped on iteration", "is_iteration_limit_reached"),
    ("Result - Stopped on time", "is_seconds_limit_reached"),
]

_limit_indicators = [indicator for _, indicator in _cbc_result]


class EngineRecord:
    def __init__(self, column_solution, objective_value, indicators):
        """Raw output of an engine.

        :param column_solution: value of every column
        :type column_solution: np.ndarray
        :param objective_value: objective value of `column_solution`
        :type objective_value: float
        :param indicators: termination indicators, in the order of `status.INDICATORS`
        :type indicators: Dict[str,bool]
        """
        self.column_solution = column_solution
        self.objective_value = objective_value
        self.indicators = indicators

    def __repr__(self):
        return "EngineRecord(column_solution=%s, objective_value=%s, indicators=%s)" % (
            self.column_solution, self.objective_value, self.indicators)


class Engine(ABC):
    """Abstract base class for MILP engines."""

    @abstractmethod
    def solve(self, milp, arguments, config):
        """Solves `milp`. Blocks until the engine terminates.

        :param milp: the problem
        :type milp: milp.MILP
        :param arguments: compiled argument tokens, see `arguments.compile_arguments`
        :type arguments: Tuple[str]
        :param config: settings of this solve
        :type config: config.SolverConfig
        :return: raw engine output
        :rtype: engine.EngineRecord
        """
        pass

    def __repr__(self):
        return type(self).__name__


def _bound(value):
    return None if math.isinf(value) else float(value)


def to_pulp(milp):
    """Builds a PuLP model of `milp`. Columns are named ``x0, x1, ...``. A row becomes an
    equality if its bounds are equal and otherwise one constraint per finite bound;
    rows without finite bounds are left out. Duplicate matrix entries are summed.
    Maximization problems get a negated objective, so that the model always minimizes.

    :type milp: milp.MILP
    :return: the model and its variables, in column order
    :rtype: Tuple[pulp.LpProblem, List[pulp.LpVariable]]
    """
    model = pulp.LpProblem("cbcbind", pulp.LpMinimize)
    integer = set(milp.integer_indices)
    variables = []
    for j in range(milp.ncol):
        cat = pulp.LpInteger if j in integer else pulp.LpContinuous
        variables.append(pulp.LpVariable("x%d" % j, lowBound=_bound(milp.col_lb[j]),
                                         upBound=_bound(milp.col_ub[j]), cat=cat))
    model.addVariables(variables)

    sign = -1.0 if milp.maximize else 1.0
    objective = pulp.LpAffineExpression()
    for j, coeff in enumerate(milp.obj):
        objective.addterm(variables[j], sign * float(coeff))
    model += objective

    rows = [pulp.LpAffineExpression() for _ in range(milp.nrow)]
    mat = milp.mat
    for i, j, value in zip(mat.row, mat.col, mat.data):
        rows[i].addterm(variables[j], float(value))

    for i, lhs in enumerate(rows):
        lb, ub = milp.row_lb[i], milp.row_ub[i]
        if lb == ub:
            model += pulp.LpConstraint(e=lhs, sense=pulp.LpConstraintEQ, rhs=float(ub), name="r%d" % i)
            continue
        if not math.isinf(lb):
            model += pulp.LpConstraint(e=lhs, sense=pulp.LpConstraintGE, rhs=float(lb), name="r%d_lo" % i)
        if not math.isinf(ub):
            model += pulp.LpConstraint(e=lhs, sense=pulp.LpConstraintLE, rhs=float(ub), name="r%d_up" % i)

    return model, variables


def parse_solution(lines, column_names):
    """Parses the contents of a CBC solution file written with ``-printingOptions all``.

    :param lines: lines of the solution file
    :type lines: Iterable[str]
    :param column_names: names of the columns, in column order
    :type column_names: List[str]
    :return: termination indicators (all false if the status line is not recognized)
        and the column values (0 for columns that are not listed)
    :rtype: Tuple[Dict[str,bool], np.ndarray]
    """
    lines = iter(lines)
    status_line = next(lines, "").strip()
    indicators = {name: False for name in INDICATORS}
    for prefix, indicator in _cbc_status:
        if status_line.startswith(prefix):
            indicators[indicator] = True
            break
    else:
        logger.warning("unrecognized CBC status line: %r", status_line)

    index_by_name = {name: idx for idx, name in enumerate(column_names)}
    values = np.zeros(len(column_names))
    for line in lines:
        fields = line.split()
        if fields[:1] == ["**"]:
            # infeasible entries are marked by a leading "**"
            fields = fields[1:]
        if len(fields) < 3:
            continue
        idx = index_by_name.get(fields[1])
        if idx is not None:
            values[idx] = float(fields[2])
    return indicators, values


def parse_log(lines):
    """Returns the limit indicator named by the ``Result - Stopped on ...`` line of CBC's
    console output, or None if CBC did not stop on a limit.

    :param lines: lines of CBC's console output
    :type lines: Iterable[str]
    :rtype: str
    """
    for line in lines:
        line = line.strip()
        for prefix, indicator in _cbc_result:
            if line.startswith(prefix):
                return indicator
    return None


def apply_limit(indicators, limit):
    """Replaces the limit indicator read from the solution file by `limit`, the one found
    in CBC's console output. Indicators that are not limits are left as they are.

    :type indicators: Dict[str,bool]
    :type limit: str
    :rtype: Dict[str,bool]
    """
    if limit is None or not any(indicators[name] for name in _limit_indicators):
        return indicators
    indicators = dict(indicators)
    for name in _limit_indicators:
        indicators[name] = name == limit
    return indicators


class CbcEngine(Engine):
    """Solves problems with the CBC executable.

    .. code-block::

        engine = CbcEngine()
        if engine.available():
            result = cbc_solve(obj, A, row_ub, engine=engine)
    """
    def __init__(self, path=None):
        """
        :param path: path to a CBC executable. If None, the executable bundled with PuLP is used.
        :type path: str, optional
        """
        if path is None:
            self.__solver = pulp.PULP_CBC_CMD()
        else:
            self.__solver = pulp.COIN_CMD(path=path)
        self.path = self.__solver.path

    def available(self):
        """Returns whether the CBC executable can be run."""
        return bool(self.__solver.available())

    def command(self, arguments, mps_path, solution_path):
        """Returns the command line for `arguments`. The problem placeholder is replaced by the
        executable and the MPS file; writing the solution file is requested right before the
        final token.

        :rtype: List[str]
        """
        return [self.path, mps_path] + list(arguments[1:-1]) + \
            ["-printingOptions", "all", "-solution", solution_path] + list(arguments[-1:])

    def solve(self, milp, arguments, config):
        model, variables = to_pulp(milp)
        tmpdir = tempfile.mkdtemp(prefix="cbcbind-")
        try:
            mps_path = os.path.join(tmpdir, "problem.mps")
            solution_path = os.path.join(tmpdir, "problem.sol")
            model.writeMPS(mps_path)

            cmd = self.command(arguments, mps_path, solution_path)
            logger.debug("running %s", " ".join(cmd))
            completed = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT,
                                       universal_newlines=True)
            if config.print_output:
                print(completed.stdout, end="")
            if completed.returncode != 0:
                raise pulp.PulpSolverError(
                    "Pulp: Error while executing %s (exit code %d)" % (self.path, completed.returncode))
            if not os.path.exists(solution_path):
                raise pulp.PulpSolverError("Pulp: Error while executing %s (no solution file)" % self.path)

            with open(solution_path) as f:
                indicators, column_solution = parse_solution(f, [var.name for var in variables])
            indicators = apply_limit(indicators, parse_log(completed.stdout.splitlines()))
        finally:
            if config.keep_files:
                logger.info("kept CBC files in %s", tmpdir)
            else:
                shutil.rmtree(tmpdir, ignore_errors=True)

        objective_value = float(np.dot(milp.obj, column_solution))
        return EngineRecord(column_solution, objective_value, indicators)
