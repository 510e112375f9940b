import logging

import numpy as np
from scipy.sparse import coo_matrix

from cbcbind import cbc_solve, SolverConfig

logging.basicConfig(level=logging.DEBUG)

# max 4a + 2b + c + 2d + 10e
# s.t.
#   12a + 2b + c + d + 4e <= 15
#   a + b >= 1
#   a,b,c,d,e in {0,1}
values = [4, 2, 1, 2, 10]
A = coo_matrix(([12, 2, 1, 1, 4, 1, 1], ([0, 0, 0, 0, 0, 1, 1], [0, 1, 2, 3, 4, 0, 1])), shape=(2, 5))

config = SolverConfig(options={"log": 0})
result = cbc_solve(obj=values,
                   mat=A,
                   row_lb=[-np.inf, 1],
                   row_ub=[15, np.inf],
                   col_lb=[0] * 5,
                   col_ub=[1] * 5,
                   is_integer=[True] * 5,
                   objective="max",
                   cbc_args={"sec": 10, "presolve": "on"},
                   config=config)
print(result)
