"""
Módulo que contém as exceções do pacote difference_constraints.

Contradições entre restrições NÃO são exceções: ``WeightedDSU.unite`` apenas
retorna False. As exceções abaixo cobrem entrada inválida e overflow.
"""


class DifferenceConstraintsError(Exception):
    """Classe base para todos os erros do pacote."""


class MalformedInputError(DifferenceConstraintsError, ValueError):
    """Entrada com token não inteiro, truncada ou com contagens negativas."""


class ElementOutOfRangeError(DifferenceConstraintsError, ValueError):
    """Restrição que referencia um elemento fora do intervalo [1, n]."""

    def __init__(self, element, num_elements, constraint_index=None):
        self.element = element
        self.num_elements = num_elements
        self.constraint_index = constraint_index
        where = f" (restrição {constraint_index})" if constraint_index is not None else ""
        super().__init__(
            f"Elemento {element} fora do intervalo [1, {num_elements}]{where}."
        )


class OffsetOverflowError(DifferenceConstraintsError, OverflowError):
    """Offset acumulado não cabe em um inteiro de 64 bits com sinal."""
