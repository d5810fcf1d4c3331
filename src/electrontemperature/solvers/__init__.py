from electrontemperature.solvers.newton import NewtonSolver, NewtonState, SolveResult, SolveStatus

__all__ = ["NewtonSolver", "NewtonState", "SolveResult", "SolveStatus"]
