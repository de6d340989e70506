# bnb_kp/solvers/classic/gurobi_solver.py
from typing import Any, Dict, List, Sequence, Tuple

from bnb_kp.solvers.interface import SolverInterface


class GurobiSolver(SolverInterface):
    """
    Solves the 0/1 knapsack problem as a binary program with Gurobi.
    Requires the optional 'gurobipy' dependency (pip install .[gurobi]).
    """
    def __init__(self, config: Dict[str, Any] = None):
        super().__init__(config)
        self.name = "Gurobi"

    def _solve(self, weights: Sequence, values: Sequence, capacity) -> Tuple[float, List[int]]:
        from gurobipy import Model, GRB

        n = len(weights)
        model = Model("Knapsack")

        # Shut down output
        model.setParam('OutputFlag', 0)

        x = model.addVars(n, vtype=GRB.BINARY, name="x")
        model.setObjective(sum(float(values[i]) * x[i] for i in range(n)), GRB.MAXIMIZE)
        model.addConstr(sum(float(weights[i]) * x[i] for i in range(n)) <= float(capacity), "Capacity")

        model.optimize()

        solution = [1 if x[i].X > 0.5 else 0 for i in range(n)]
        value = sum(float(values[i]) for i in range(n) if solution[i])
        return value, solution
