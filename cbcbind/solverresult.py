import numpy as np

from .status import STATUSES, solution_status


class SolverResult:
    def __init__(self, status, column_solution, objective_value):
        """Result of a solved MILP instance.

        :param status: Status of the solved instance, one of "optimal", "unbounded", "infeasible",
            "nodelimit", "solutionlimit", "abandoned", "iterationlimit", "timelimit" or "unknown".
        :type status: str
        :param column_solution: Resulting assignments for the columns, in the order of the constraint matrix.
        :type column_solution: List[float]
        :param objective_value: Resulting value of the objective function
        :type objective_value: float
        """
        assert status in STATUSES, "status must be one of %s, got %s" % (STATUSES, status)
        column_solution = np.array(column_solution, dtype=float)
        column_solution.setflags(write=False)
        self.__status = status
        self.__column_solution = column_solution
        self.__objective_value = float(objective_value)

    @classmethod
    def from_record(cls, record):
        """Builds the result for the raw output of an engine.

        :param record: raw engine output
        :type record: engine.EngineRecord
        :rtype: solverresult.SolverResult
        """
        return cls(solution_status(record.indicators), record.column_solution, record.objective_value)

    @property
    def status(self):
        """Solution status, one of `status.STATUSES`."""
        return self.__status

    @property
    def column_solution(self):
        """One value per column, in the order of the constraint matrix. Read-only."""
        return self.__column_solution

    @property
    def objective_value(self):
        """Value of the objective function at `column_solution`."""
        return self.__objective_value

    def __repr__(self):
        return "SolverResult(status=%s, column_solution=%s, objective_value=%s)" % (
            self.status, self.column_solution, self.objective_value)
