"""
Leitura de casos de teste e escrita dos vereditos.
"""
import json
import logging

import numpy as np

from difference_constraints.errors import MalformedInputError
from difference_constraints.models.constraint_system import ConstraintSystem

logger = logging.getLogger(__name__)


class _TokenReader:
    """Itera sobre os tokens separados por espaço, convertendo-os para int."""

    def __init__(self, text):
        self._tokens = text.split()
        self._pos = 0

    def next_int(self, what):
        if self._pos >= len(self._tokens):
            raise MalformedInputError(f"Entrada truncada: esperado {what}.")
        token = self._tokens[self._pos]
        self._pos += 1
        try:
            return int(token)
        except ValueError:
            raise MalformedInputError(
                f"Token {token!r} não é inteiro (esperado {what}).") from None

    def next_count(self, what):
        value = self.next_int(what)
        if value < 0:
            raise MalformedInputError(f"{what} negativo: {value}.")
        return value


def parse_test_cases(text):
    """
    Converte o texto de entrada em casos de teste.

    Formato: ``t``, e para cada caso ``n m`` seguido de ``m`` triplas ``i j c``.

    Args:
        text (str): Conteúdo completo da entrada.

    Returns:
        list[ConstraintSystem]: Um sistema por caso de teste, na ordem da entrada.

    Raises:
        MalformedInputError: Se houver token não inteiro, contagem negativa ou entrada truncada.
    """
    reader = _TokenReader(text)
    num_cases = reader.next_count("t")
    systems = []
    for case in range(num_cases):
        n = reader.next_count(f"n do caso {case + 1}")
        m = reader.next_count(f"m do caso {case + 1}")
        system = ConstraintSystem(n)
        for _ in range(m):
            i = reader.next_int("i")
            j = reader.next_int("j")
            c = reader.next_int("c")
            system.add_constraint(i, j, c)
        systems.append(system)
    logger.debug(f"{len(systems)} casos de teste lidos.")
    return systems


def read_test_cases(source):
    """
    Lê casos de teste de um arquivo ou de um stream de texto.

    Args:
        source (str | pathlib.Path | TextIO): Caminho do arquivo ou stream já aberto.

    Returns:
        list[ConstraintSystem]: Os casos de teste.
    """
    if hasattr(source, "read"):
        return parse_test_cases(source.read())
    with open(source, "r") as f:
        return parse_test_cases(f.read())


def read_json_test_cases(filepath):
    """
    Lê casos de teste no formato JSON produzido por ``convert_instances``.

    Args:
        filepath (str | pathlib.Path): Caminho do arquivo JSON.

    Returns:
        list[ConstraintSystem]: Os casos de teste.

    Raises:
        MalformedInputError: Se o documento não tiver a estrutura esperada.
    """
    with open(filepath, "r") as f:
        try:
            document = json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"JSON inválido em {filepath}: {e}") from e

    systems = []
    try:
        for case_number, case in enumerate(document["test_cases"], start=1):
            num_elements = case["num_elements"]
            if not _is_json_int(num_elements) or num_elements < 0:
                raise MalformedInputError(
                    f"num_elements inválido no caso {case_number} de {filepath}: {num_elements!r}.")
            raw_rows = case["constraints"]
            if not isinstance(raw_rows, list):
                raise MalformedInputError(
                    f"constraints do caso {case_number} de {filepath} não é uma lista.")
            for index, row in enumerate(raw_rows):
                if not isinstance(row, list) or len(row) != 3 or not all(_is_json_int(v) for v in row):
                    raise MalformedInputError(
                        f"Restrição {index} do caso {case_number} de {filepath} "
                        f"não é uma tripla de inteiros: {row!r}.")
            # Formato já confirmado: (m, 3) inteiros; o int64 rejeita valores grandes demais
            rows = np.array(raw_rows, dtype=np.int64).reshape(-1, 3)
            systems.append(ConstraintSystem(
                num_elements,
                [(int(i), int(j), int(c)) for i, j, c in rows],
            ))
    except OverflowError as e:
        raise MalformedInputError(f"Valor fora do intervalo de 64 bits em {filepath}: {e}") from e
    except (KeyError, TypeError) as e:
        raise MalformedInputError(f"Estrutura inválida em {filepath}: {e}") from e
    return systems


def _is_json_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def format_verdict(consistent):
    return "YES" if consistent else "NO"


def write_verdicts(verdicts, stream):
    """
    Escreve uma linha YES/NO por caso de teste.

    Args:
        verdicts (Iterable[bool]): Vereditos na ordem da entrada.
        stream (TextIO): Destino da saída.
    """
    stream.write("".join(f"{format_verdict(v)}\n" for v in verdicts))
    stream.flush()
