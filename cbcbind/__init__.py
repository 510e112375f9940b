"""This module binds the CBC solver for mixed integer linear programs (MILPs).
A problem is given by coefficient vectors, a constraint matrix and bounds, and
is solved by the CBC executable that ships with PuLP. CBC options are passed
through as command line flags."""
from .errors import ValidationError, ShapeError, OptionError
from .arguments import Flag, NamedValue, parse_options, compile_arguments
from .status import STATUSES, solution_status
from .solverresult import SolverResult
from .config import SolverConfig
from .engine import Engine, EngineRecord, CbcEngine
from .milp import MILP, cbc_solve
