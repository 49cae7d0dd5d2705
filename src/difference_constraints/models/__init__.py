from difference_constraints.models.constraint_system import ConstraintSystem
from difference_constraints.models.weighted_dsu import WeightedDSU

__all__ = ["ConstraintSystem", "WeightedDSU"]
