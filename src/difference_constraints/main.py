import logging
import sys

from difference_constraints.common import read_json_test_cases, read_test_cases, write_verdicts
from difference_constraints.errors import DifferenceConstraintsError
from difference_constraints.solver import Solver

logger = logging.getLogger(__name__)

DEFAULT_SOLVER_TYPE = "dsu"  # "dsu" ou "cpsat"
CPSAT_TIME_LIMIT = 10.0  # Segundos por caso de teste (apenas CP-SAT)
LOG_LEVEL = logging.WARNING  # Logs vão para stderr; stdout só recebe YES/NO


def load_test_cases(instance_path=None):
    """
    Carrega os casos de teste de um arquivo (texto ou .json), de um stream ou da entrada padrão.

    Args:
        instance_path (str | TextIO | None): Caminho do arquivo, stream aberto, ou None para ler stdin.

    Returns:
        list[ConstraintSystem]: Os casos de teste.
    """
    if instance_path is None:
        return read_test_cases(sys.stdin)
    if hasattr(instance_path, "read"):
        return read_test_cases(instance_path)
    if str(instance_path).endswith(".json"):
        return read_json_test_cases(instance_path)
    return read_test_cases(instance_path)


def main(instance_path=None, output=None, solver_type=DEFAULT_SOLVER_TYPE):
    """
    Função principal do programa. Lê os casos de teste, decide a consistência de
    cada um e escreve uma linha YES/NO por caso, na ordem da entrada.

    Args:
        instance_path (str | None): Caminho da instância; None lê da entrada padrão.
        output (TextIO | None): Destino dos vereditos; None usa stdout.
        solver_type (str): Backend do Solver ("dsu" ou "cpsat").

    Returns:
        int: Código de saída (0 em sucesso, 1 em entrada inválida).
    """
    output = output if output is not None else sys.stdout

    try:
        systems = load_test_cases(instance_path)
    except (DifferenceConstraintsError, OSError) as e:
        logger.error(f"Falha ao ler a entrada: {e}")
        return 1

    verdicts = []
    for case_number, system in enumerate(systems, start=1):
        solver = Solver.from_system(system, solver_type=solver_type)
        try:
            verdicts.append(solver.solve(time_limit=CPSAT_TIME_LIMIT))
        except DifferenceConstraintsError as e:
            # Vereditos já decididos são escritos antes de abortar
            write_verdicts(verdicts, output)
            logger.error(f"Caso {case_number}: {e}")
            return 1

    write_verdicts(verdicts, output)
    logger.info(f"{len(verdicts)} caso(s) processado(s).")
    return 0


def cli():
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    if len(sys.argv) > 2:
        print("Usage: difference-constraints [instance_path]", file=sys.stderr)
        sys.exit(1)

    instance_path = sys.argv[1] if len(sys.argv) == 2 else None
    sys.exit(main(instance_path))


if __name__ == "__main__":
    cli()
