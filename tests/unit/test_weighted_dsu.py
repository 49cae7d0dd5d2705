"""
Testes unitários para a classe WeightedDSU.
"""
import random

import pytest

from difference_constraints.errors import OffsetOverflowError
from difference_constraints.models.weighted_dsu import WeightedDSU

pytestmark = [pytest.mark.unit]


@pytest.fixture
def chain_dsu():
    """Fixture com uma cadeia longa 1 -> 2 -> ... -> 6, x_k - x_{k+1} = k."""
    dsu = WeightedDSU(6)
    for k in range(1, 6):
        assert dsu.unite(k, k + 1, k)
    return dsu


def test_initial_state():
    dsu = WeightedDSU(4)
    assert len(dsu) == 4
    assert list(dsu.parent) == [0, 1, 2, 3, 4]
    assert list(dsu.offset) == [0, 0, 0, 0, 0]
    for i in range(1, 5):
        assert dsu.find(i) == (i, 0)
    assert dsu.count_components() == 4


def test_find_compresses_path(chain_dsu):
    """Após find, o elemento aponta direto para a raiz com o offset total."""
    root, offset = chain_dsu.find(1)
    assert root == 6
    assert offset == 1 + 2 + 3 + 4 + 5
    assert chain_dsu.parent[1] == 6
    assert chain_dsu.offset[1] == 15
    # Ancestrais visitados também foram comprimidos
    for k in range(2, 6):
        assert chain_dsu.parent[k] == 6
        assert chain_dsu.offset[k] == sum(range(k, 6))


def test_find_is_idempotent(chain_dsu):
    first = chain_dsu.find(2)
    for _ in range(3):
        assert chain_dsu.find(2) == first


def test_unite_attaches_root_of_i_under_root_of_j():
    dsu = WeightedDSU(2)
    assert dsu.unite(1, 2, 5)
    assert dsu.parent[1] == 2
    assert dsu.offset[1] == 5


def test_self_constraints():
    dsu = WeightedDSU(3)
    assert dsu.unite(2, 2, 0) is True
    assert dsu.unite(2, 2, 4) is False
    assert dsu.unite(3, 3, -1) is False


def test_transitivity():
    dsu = WeightedDSU(3)
    assert dsu.unite(1, 2, 5)
    assert dsu.unite(2, 3, 3)
    assert dsu.unite(1, 3, 8) is True
    assert dsu.unite(1, 3, 7) is False
    # A contradição não altera os valores já derivados
    assert dsu.difference(1, 3) == 8


def test_reverse_direction_constraint():
    dsu = WeightedDSU(3)
    assert dsu.unite(1, 2, 5)
    assert dsu.unite(2, 1, -5)
    assert not dsu.unite(2, 1, 5)


def test_disjoint_components_never_conflict():
    dsu = WeightedDSU(4)
    assert dsu.unite(1, 2, 10)
    assert dsu.unite(3, 4, -7)
    assert dsu.unite(2, 3, 123456789)
    assert dsu.difference(1, 4) == 10 + 123456789 + (-7)


def test_difference_and_connected():
    dsu = WeightedDSU(4)
    dsu.unite(1, 2, 3)
    assert dsu.connected(1, 2)
    assert not dsu.connected(1, 3)
    assert dsu.difference(1, 2) == 3
    assert dsu.difference(2, 1) == -3
    assert dsu.difference(1, 3) is None


def test_components():
    dsu = WeightedDSU(5)
    dsu.unite(1, 3, 0)
    dsu.unite(4, 5, 2)
    groups = sorted(dsu.components().values())
    assert groups == [[1, 3], [2], [4, 5]]
    assert dsu.count_components() == 3


def test_union_by_size_keeps_offsets():
    """Com union by size, a raiz maior permanece raiz e a álgebra se mantém."""
    dsu = WeightedDSU(4, union_by_size=True)
    assert dsu.unite(2, 3, 4)
    assert dsu.unite(3, 4, 1)
    big_root, _ = dsu.find(2)
    # Componente {2, 3, 4} é maior que {1}: a raiz de 1 vira filha
    assert dsu.unite(2, 1, 6)
    assert dsu.find(1)[0] == big_root
    assert dsu.difference(2, 1) == 6
    assert dsu.difference(1, 4) == (4 + 1) - 6
    # Caso inverso: i no componente maior, j isolado
    dsu2 = WeightedDSU(3, union_by_size=True)
    dsu2.unite(1, 2, 2)
    assert dsu2.unite(1, 3, 9)
    assert dsu2.find(3)[0] == dsu2.find(1)[0] != 3
    assert dsu2.difference(1, 3) == 9
    assert dsu2.difference(3, 2) == 2 - 9


def test_order_independence():
    """Restrições consistentes em qualquer ordem levam às mesmas diferenças."""
    rng = random.Random(7)
    n = 30
    values = [0] + [rng.randint(-1000, 1000) for _ in range(n)]
    pairs = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(80)]
    constraints = [(i, j, values[i] - values[j]) for i, j in pairs]

    reference = WeightedDSU(n)
    assert all(reference.unite(*c) for c in constraints)

    for _ in range(5):
        shuffled = constraints[:]
        rng.shuffle(shuffled)
        dsu = WeightedDSU(n, union_by_size=rng.random() < 0.5)
        assert all(dsu.unite(*c) for c in shuffled)
        for i in range(1, n + 1):
            for j in range(1, n + 1):
                assert dsu.difference(i, j) == reference.difference(i, j)


def test_large_offsets_fit_in_64_bits():
    dsu = WeightedDSU(3)
    big = 2 ** 61
    assert dsu.unite(1, 2, big)
    assert dsu.unite(2, 3, big - 1)
    assert dsu.difference(1, 3) == 2 * big - 1


def test_offset_overflow_is_reported():
    dsu = WeightedDSU(3)
    dsu.unite(1, 2, 2 ** 62)
    with pytest.raises(OffsetOverflowError):
        dsu.unite(2, 3, 2 ** 62)
        dsu.find(1)


def test_offsets_are_plain_ints():
    dsu = WeightedDSU(3)
    dsu.unite(1, 2, 4)
    dsu.unite(2, 3, 1)
    root, offset = dsu.find(1)
    assert type(root) is int
    assert type(offset) is int


def test_int64_boundaries_are_accepted():
    dsu = WeightedDSU(3)
    assert dsu.unite(1, 2, 2 ** 63 - 1)
    assert dsu.unite(3, 2, -(2 ** 63))
    assert dsu.difference(1, 2) == 2 ** 63 - 1
    assert dsu.difference(3, 2) == -(2 ** 63)


def test_overflowing_union_leaves_structure_unchanged():
    dsu = WeightedDSU(3)
    assert dsu.unite(1, 2, -(2 ** 63))
    with pytest.raises(OffsetOverflowError):
        dsu.unite(3, 1, -1)
    assert dsu.parent[3] == 3
    assert dsu.find(3) == (3, 0)
    assert dsu.difference(1, 2) == -(2 ** 63)
