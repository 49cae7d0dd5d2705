"""
Módulo principal que fornece a classe Solver para verificar sistemas de restrições de diferença.
"""
from difference_constraints.common.instance_io import format_verdict
from difference_constraints.models.constraint_system import ConstraintSystem
from difference_constraints.validators.constraint_validator import ConstraintValidator
from difference_constraints.solvers.dsu_solver import DSUSolver
from difference_constraints.solvers.ortools_cpsat_solver import ORToolsCPSATSolver


class Solver:
    """
    Classe principal para decidir a consistência de um sistema x_i - x_j = c.
    """

    def __init__(self, num_elements, constraints, solver_type="dsu", **kwargs):
        """
        Inicializa uma instância de Solver.

        Args:
            num_elements (int): Número de elementos (1..n).
            constraints (list[tuple[int, int, int]]): Restrições (i, j, c) significando x_i - x_j = c.
            solver_type (str): "dsu" para o union-find com potenciais, "cpsat" para OR-Tools CP-SAT.
            **kwargs: Parâmetros adicionais do solver DSU (``union_by_size``).

        Raises:
            ValueError: Se ``solver_type`` for desconhecido.
            TypeError: Se ``**kwargs`` for passado ao solver CP-SAT, que não aceita opções.
        """
        self.system = ConstraintSystem(num_elements, constraints)
        if solver_type == "dsu":
            self.solver = DSUSolver(self.system, **kwargs)
        elif solver_type == "cpsat":
            if kwargs:
                raise TypeError(
                    f"Opções não suportadas pelo solver CP-SAT: {sorted(kwargs)}")
            self.solver = ORToolsCPSATSolver(self.system)
        else:
            raise ValueError(f"Tipo de solver desconhecido: {solver_type!r}")
        self.solver_type = solver_type
        self.validator = ConstraintValidator(num_elements)
        self.num_elements = num_elements
        self.constraints = self.system.constraints
        self.verdict = None

    @classmethod
    def from_system(cls, system, solver_type="dsu", **kwargs):
        return cls(system.num_elements, system.constraints, solver_type=solver_type, **kwargs)

    def solve(self, time_limit=10.0):
        """
        Valida o sistema e decide sua consistência usando o solver selecionado.

        Args:
            time_limit (float): Limite de tempo em segundos (usado apenas pelo CP-SAT).

        Returns:
            bool: True se as restrições são mutuamente consistentes.

        Raises:
            MalformedInputError: Se alguma restrição estiver malformada.
            ElementOutOfRangeError: Se algum elemento estiver fora de [1, n].
        """
        self.validator.validate(self.constraints)
        self.verdict = self.solver.solve(time_limit=time_limit)
        return self.verdict

    def is_consistent(self):
        """
        Returns:
            bool: O veredito do último ``solve``.

        Raises:
            RuntimeError: Se ``solve`` ainda não foi chamado.
        """
        if self.verdict is None:
            raise RuntimeError("solve() ainda não foi chamado.")
        return self.verdict

    def verdict_line(self):
        return format_verdict(self.is_consistent())
