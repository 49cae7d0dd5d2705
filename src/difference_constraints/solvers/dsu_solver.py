"""
Módulo que contém o solver baseado em WeightedDSU.
"""
import logging

from difference_constraints.models.weighted_dsu import WeightedDSU
from difference_constraints.solvers.base_solver import BaseSolver

logger = logging.getLogger(__name__)


class DSUSolver(BaseSolver):
    """
    Verifica a consistência aplicando as restrições, em ordem, a um WeightedDSU novo.
    """

    def __init__(self, system, union_by_size=False):
        super().__init__(system)
        self.union_by_size = union_by_size
        self.dsu = None
        self.first_contradiction = None

    def solve(self, **kwargs) -> bool:
        """
        Aplica as restrições até a primeira contradição.

        Returns:
            bool: True se nenhuma restrição contradiz as anteriores.
        """
        self.dsu = WeightedDSU(self.num_elements, union_by_size=self.union_by_size)
        self.first_contradiction = None

        for index, (i, j, c) in enumerate(self.constraints):
            if not self.dsu.unite(i, j, c):
                # As restrições restantes já foram lidas; apenas não são aplicadas
                self.first_contradiction = index
                logger.debug(
                    f"Contradição na restrição {index}: x{i} - x{j} = {c}, "
                    f"valor derivado {self.dsu.difference(i, j)}")
                break

        self.verdict = self.first_contradiction is None
        logger.info(
            f"DSU: n={self.num_elements}, m={len(self.constraints)}, "
            f"consistente={self.verdict}")
        return self.verdict
