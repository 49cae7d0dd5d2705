"""
Módulo que contém a classe ConstraintValidator para validar sistemas de restrições.
"""
import logging
import numbers

from difference_constraints.errors import ElementOutOfRangeError, MalformedInputError

logger = logging.getLogger(__name__)


class ConstraintValidator:
    """
    Classe responsável por validar um sistema de restrições antes de resolvê-lo.
    """
    def __init__(self, num_elements):
        """
        Inicializa o validador.

        Args:
            num_elements (int): Número de elementos do sistema.
        """
        self.num_elements = num_elements

    def validate(self, constraints):
        """
        Valida as restrições de um sistema.

        Verifica as seguintes condições:
        1. O número de elementos é um inteiro não negativo.
        2. Cada restrição tem exatamente três inteiros (i, j, c).
        3. Os elementos i e j estão em [1, n].

        Args:
            constraints (Iterable[tuple[int, int, int]]): As restrições.

        Raises:
            MalformedInputError: Se o sistema ou alguma restrição estiver malformada.
            ElementOutOfRangeError: Se algum elemento estiver fora do intervalo.
        """
        if not _is_integer(self.num_elements) or self.num_elements < 0:
            raise MalformedInputError(
                f"Número de elementos inválido: {self.num_elements!r}."
            )

        for index, constraint in enumerate(constraints):
            if len(constraint) != 3 or not all(_is_integer(v) for v in constraint):
                raise MalformedInputError(
                    f"Restrição {index} malformada: {constraint!r}."
                )
            i, j, _ = constraint
            for element in (i, j):
                if not 1 <= element <= self.num_elements:
                    raise ElementOutOfRangeError(element, self.num_elements, index)

    def is_valid(self, constraints):
        """
        Versão booleana de ``validate``.

        Returns:
            bool: True se o sistema é válido, False caso contrário. Registra o motivo no log.
        """
        try:
            self.validate(constraints)
        except (MalformedInputError, ElementOutOfRangeError) as e:
            logger.warning(f"Sistema inválido: {e}")
            return False
        return True


def _is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
