"""
Módulo que contém a classe ConstraintSystem para representar um caso de teste.
"""


class ConstraintSystem:
    """
    Classe que representa um sistema de restrições de diferença sobre n variáveis inteiras.
    """
    def __init__(self, num_elements, constraints=None):
        """
        Inicializa um sistema de restrições.

        Args:
            num_elements (int): Número de elementos (variáveis), identificados de 1 a n.
            constraints (list[tuple[int, int, int]], opcional): Lista de restrições, onde
                cada restrição (i, j, c) significa x_i - x_j = c.
        """
        self.num_elements = num_elements
        self.constraints = list(constraints) if constraints else []

    def __len__(self):
        return len(self.constraints)

    def __eq__(self, other):
        if not isinstance(other, ConstraintSystem):
            return NotImplemented
        return (self.num_elements == other.num_elements
                and self.constraints == other.constraints)

    def __repr__(self):
        return f"ConstraintSystem(num_elements={self.num_elements}, constraints={self.constraints!r})"

    def add_constraint(self, i, j, c):
        """
        Adiciona a restrição x_i - x_j = c.

        Args:
            i (int): Primeiro elemento.
            j (int): Segundo elemento.
            c (int): Diferença exigida.
        """
        self.constraints.append((i, j, c))

    def referenced_elements(self):
        """
        Returns:
            list[int]: Elementos que aparecem em alguma restrição, em ordem crescente.
        """
        return sorted({e for i, j, _ in self.constraints for e in (i, j)})

    def magnitude_bound(self):
        """
        Soma dos valores absolutos das diferenças. Em um sistema consistente, fixando
        a raiz de cada componente em 0, todo elemento fica em [-bound, bound].

        Returns:
            int: O limite.
        """
        return sum(abs(c) for _, _, c in self.constraints)
