from difference_constraints.validators.constraint_validator import ConstraintValidator

__all__ = ["ConstraintValidator"]
