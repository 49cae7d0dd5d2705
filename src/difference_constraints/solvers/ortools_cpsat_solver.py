"""
Módulo que contém a verificação de consistência via Google OR-Tools CP-SAT.
"""
import logging

from difference_constraints.errors import OffsetOverflowError
from difference_constraints.solvers.base_solver import BaseSolver

logger = logging.getLogger(__name__)

# x_i - x_j precisa caber em int64 dentro do modelo CP-SAT
CPSAT_MAX_BOUND = 2 ** 61


class ORToolsCPSATSolver(BaseSolver):
    """
    Verificador independente que modela o sistema como um problema de satisfação
    no CP-SAT. Serve como oráculo para conferir o DSUSolver.

    O domínio de cada variável é [-B, B], com B = soma dos |c|. Sistemas com
    B acima de ``CPSAT_MAX_BOUND`` não são suportados.
    """

    def solve(self, time_limit: float = 10.0, **kwargs) -> bool:
        """
        Resolve o problema de viabilidade com Google OR-Tools CP-SAT.

        Args:
            time_limit (float): Limite máximo de tempo em segundos para o solver.

        Returns:
            bool: True se existe uma atribuição inteira que satisfaz todas as restrições.

        Raises:
            OffsetOverflowError: Se a soma dos |c| exceder ``CPSAT_MAX_BOUND``.
            RuntimeError: Se o CP-SAT não chegar a uma conclusão dentro do limite.
        """
        from ortools.sat.python import cp_model

        # x_i - x_i se anula; essas restrições só dependem de c
        for i, j, c in self.constraints:
            if i == j and c != 0:
                self.verdict = False
                logger.info(f"CP-SAT: restrição x{i} - x{i} = {c} é trivialmente inviável.")
                return self.verdict

        # Fixando cada raiz em 0, nenhum valor passa da soma dos |c|
        bound = self.system.magnitude_bound()
        if bound > CPSAT_MAX_BOUND:
            raise OffsetOverflowError(
                f"Soma dos |c| ({bound}) excede o domínio suportado pelo CP-SAT "
                f"({CPSAT_MAX_BOUND}).")

        model = cp_model.CpModel()
        x = {}
        for element in self.system.referenced_elements():
            x[element] = model.new_int_var(-bound, bound, f"x_{element}")

        for i, j, c in self.constraints:
            if i != j:
                model.add(x[i] - x[j] == c)

        solver = cp_model.CpSolver()
        solver.parameters.max_time_in_seconds = time_limit
        status = solver.solve(model)

        if status in (cp_model.OPTIMAL, cp_model.FEASIBLE):
            self.verdict = True
        elif status == cp_model.INFEASIBLE:
            self.verdict = False
        else:
            raise RuntimeError(
                f"CP-SAT não concluiu. Status: {solver.status_name(status)}")

        logger.info(
            f"CP-SAT: n={self.num_elements}, m={len(self.constraints)}, "
            f"consistente={self.verdict}")
        return self.verdict
