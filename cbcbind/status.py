"""Maps the termination indicators reported by CBC to a single solution status."""
import numpy as np

# engine enumeration order; the first true indicator decides the status
STATUS_MAP = {
    "is_proven_optimal": "optimal",
    "is_proven_dual_infeasible": "unbounded",
    "is_proven_infeasible": "infeasible",
    "is_node_limit_reached": "nodelimit",
    "is_solution_limit_reached": "solutionlimit",
    "is_abandoned": "abandoned",
    "is_iteration_limit_reached": "iterationlimit",
    "is_seconds_limit_reached": "timelimit",
}

INDICATORS = tuple(STATUS_MAP)

UNKNOWN = "unknown"

STATUSES = tuple(STATUS_MAP.values()) + (UNKNOWN,)


def _is_true(value):
    return isinstance(value, (bool, np.bool_)) and bool(value)


def solution_status(indicators):
    """Returns the status label for a set of termination indicators.

    CBC does not guarantee that at most one indicator is set. If several are,
    the first one in iteration order of `indicators` wins. Only real booleans
    count as set; indicator names not in `STATUS_MAP` are ignored.

    :param indicators: mapping from indicator name to boolean, in engine order
    :type indicators: Dict[str,bool]
    :return: one of `STATUSES`, "unknown" if no indicator is set
    :rtype: str
    """
    for name, value in indicators.items():
        if name in STATUS_MAP and _is_true(value):
            return STATUS_MAP[name]
    return UNKNOWN
