"""
Verificação de consistência de restrições de diferença x_i - x_j = c
usando union-find com potenciais.
"""
from difference_constraints.models import ConstraintSystem, WeightedDSU
from difference_constraints.solver import Solver

__version__ = "0.1.0"

__all__ = ["ConstraintSystem", "Solver", "WeightedDSU"]
