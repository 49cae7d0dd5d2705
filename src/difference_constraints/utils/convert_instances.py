import numpy as np
from pathlib import Path
import json
import logging
from typing import Dict, Any

from difference_constraints.common.instance_io import parse_test_cases
from difference_constraints.errors import MalformedInputError

logger = logging.getLogger(__name__)


def parse_instance(filepath: str) -> Dict[str, Any]:
    """Converte uma instância do formato texto para um dicionário serializável em JSON."""
    with open(filepath, 'r') as f:
        lines = f.readlines()

    # Remove comentários e linhas vazias
    text = "\n".join(line.strip() for line in lines
                     if line.strip() and not line.lstrip().startswith('#'))

    test_cases = []
    for system in parse_test_cases(text):
        constraints = np.array(system.constraints, dtype=np.int64).reshape(-1, 3)
        test_cases.append({
            'num_elements': system.num_elements,
            'constraints': constraints.tolist(),
        })

    return {
        'name': Path(filepath).stem,
        'test_cases': test_cases,
    }


def convert_all_instances(input_dir: str, output_dir: str) -> int:
    """Converte todas as instâncias do diretório de entrada para o diretório de saída.

    Returns:
        int: Número de arquivos convertidos.
    """
    input_path = Path(input_dir)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    converted = 0
    for filepath in sorted(input_path.glob('*')):
        if filepath.is_file() and not filepath.name.startswith('.') and filepath.suffix != '.json':
            try:
                instance = parse_instance(str(filepath))
            except MalformedInputError as e:
                logger.error(f"Erro ao converter {filepath.name}: {e}")
                continue
            output_file = output_path / f"{instance['name']}.json"

            with open(output_file, 'w') as f:
                json.dump(instance, f, indent=2)

            converted += 1
            logger.info(f"Convertido: {filepath.name} -> {output_file.name}")
    return converted


def main():
    """Função principal."""
    logging.basicConfig(level=logging.INFO)
    input_dir = "data"
    output_dir = "data/json"

    logger.info("Iniciando conversão das instâncias...")
    count = convert_all_instances(input_dir, output_dir)
    logger.info(f"Conversão concluída! {count} arquivo(s).")


if __name__ == "__main__":
    main()
