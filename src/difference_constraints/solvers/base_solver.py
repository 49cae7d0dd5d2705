"""
Módulo que contém a classe abstrata BaseSolver para verificadores de consistência.
"""
from abc import ABC, abstractmethod

from difference_constraints.models.constraint_system import ConstraintSystem


class BaseSolver(ABC):
    """
    Classe base abstrata para solvers de sistemas de restrições de diferença.
    """
    def __init__(self, system: ConstraintSystem):
        """
        Inicializa um solver para um caso de teste.

        Args:
            system (ConstraintSystem): O sistema de restrições a verificar.
        """
        self.system = system
        self.num_elements = system.num_elements
        self.constraints = system.constraints
        self.verdict = None

    @abstractmethod
    def solve(self, **kwargs) -> bool:
        """
        Método abstrato que decide se o sistema é consistente.
        Deve ser implementado pelas classes concretas.

        Returns:
            bool: True se todas as restrições são mutuamente consistentes.
        """
        pass
