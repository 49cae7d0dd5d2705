"""
Módulo que contém a classe WeightedDSU (union-find com potenciais).
"""
from difference_constraints.errors import OffsetOverflowError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class WeightedDSU:
    """
    Estrutura Disjoint Set Union com offsets (potenciais) relativos ao pai.
    Cada elemento guarda ``offset[i] = x_i - x_parent[i]``; após ``find(i)``
    o offset passa a ser relativo à raiz do componente.
    Usa path compression iterativa; union by size é opcional.

    Os elementos são indexados de 1 a n (a posição 0 não é usada).
    """

    def __init__(self, n, union_by_size=False):
        """
        Inicializa n elementos, cada um em seu próprio componente.

        Args:
            n (int): Número de elementos.
            union_by_size (bool): Se True, a raiz do menor componente vira filha
                da raiz do maior. Se False, a raiz de i é sempre ligada sob a raiz de j.
        """
        self.n = n
        self.union_by_size = union_by_size
        self.parent = list(range(n + 1))
        self.offset = [0] * (n + 1)
        self.size = [1] * (n + 1) if union_by_size else None

    def __len__(self):
        return self.n

    def _store_offset(self, k, value):
        # Offsets são acumuladores int64 com sinal
        if not INT64_MIN <= value <= INT64_MAX:
            raise OffsetOverflowError(
                f"Offset {value} do elemento {k} excede o intervalo de 64 bits.")
        self.offset[k] = value

    def find(self, i):
        """
        Encontra a raiz do componente de i e comprime o caminho.

        Args:
            i (int): Elemento em [1, n].

        Returns:
            tuple[int, int]: (raiz, x_i - x_raiz).
        """
        parent = self.parent
        path = []
        k = i
        while parent[k] != k:
            path.append(k)
            k = parent[k]
        root = k

        # Do nó mais próximo da raiz para o mais distante: o pai antigo já está comprimido
        for node in reversed(path):
            old_parent = parent[node]
            if old_parent != root:
                self._store_offset(node, self.offset[node] + self.offset[old_parent])
                parent[node] = root

        return root, self.offset[i]

    def unite(self, i, j, c):
        """
        Aplica a restrição x_i - x_j = c.

        Args:
            i (int): Primeiro elemento.
            j (int): Segundo elemento.
            c (int): Valor exigido para x_i - x_j.

        Returns:
            bool: True se a restrição é consistente com as anteriores, False se há contradição.
        """
        root_i, off_i = self.find(i)
        root_j, off_j = self.find(j)

        if root_i == root_j:
            return off_i - off_j == c

        # x_ri - x_rj = c + off_j - off_i
        delta = c + off_j - off_i
        if self.union_by_size and self.size[root_i] > self.size[root_j]:
            self._store_offset(root_j, -delta)
            self.parent[root_j] = root_i
            self.size[root_i] += self.size[root_j]
        else:
            self._store_offset(root_i, delta)
            self.parent[root_i] = root_j
            if self.union_by_size:
                self.size[root_j] += self.size[root_i]
        return True

    def connected(self, i, j):
        return self.find(i)[0] == self.find(j)[0]

    def difference(self, i, j):
        """
        Retorna o valor já derivado de x_i - x_j.

        Returns:
            int | None: A diferença, ou None se i e j estão em componentes distintos.
        """
        root_i, off_i = self.find(i)
        root_j, off_j = self.find(j)
        if root_i != root_j:
            return None
        return off_i - off_j

    def components(self):
        """
        Agrupa os elementos 1..n por componente.

        Returns:
            dict[int, list[int]]: Raiz -> elementos do componente, em ordem crescente.
        """
        groups = {}
        for element in range(1, self.n + 1):
            root, _ = self.find(element)
            groups.setdefault(root, []).append(element)
        return groups

    def count_components(self):
        return len(self.components())
