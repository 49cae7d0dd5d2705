"""
Pacote que contém os solvers de consistência.
"""
from difference_constraints.solvers.base_solver import BaseSolver
from difference_constraints.solvers.dsu_solver import DSUSolver
from difference_constraints.solvers.ortools_cpsat_solver import ORToolsCPSATSolver

__all__ = ["BaseSolver", "DSUSolver", "ORToolsCPSATSolver"]
