# src/configup/core/paths/scripts.py
"""
Listagem de scripts de um diretório da aplicação.

Um script é um arquivo que o interpretador consegue importar
(`importlib.machinery.all_suffixes()`), com exceção de arquivos de dados
(``.json``) e de extensões nativas (``.so``/``.pyd``).

Regras de listagem:
    - apenas entradas imediatas do diretório (sem recursão)
    - `ENTRY_POINT_FILENAME` e nomes iniciados por ``_`` são ignorados
    - ordem alfabética sem distinção de maiúsculas/minúsculas
"""

from __future__ import annotations

import logging
import os
from importlib import machinery
from pathlib import Path
from typing import FrozenSet, List, Union

logger = logging.getLogger(__name__)

ENTRY_POINT_FILENAME = "__init__.py"


def _last_suffixes(suffixes: List[str]) -> FrozenSet[str]:
    # ".cpython-311-x86_64-linux-gnu.so" -> ".so"
    return frozenset(os.path.splitext("x" + s)[1] for s in suffixes)


SCRIPT_EXTENSIONS: FrozenSet[str] = _last_suffixes(machinery.all_suffixes())
EXCLUDED_EXTENSIONS: FrozenSet[str] = frozenset({".json"}) | _last_suffixes(
    machinery.EXTENSION_SUFFIXES
)


def is_script_extension(filename: Union[str, Path]) -> bool:
    """
    Indica se `filename` tem extensão de script carregável.

    Args:
        filename (Union[str, Path]): Nome ou caminho do arquivo.

    Returns:
        bool: True se a extensão está em `SCRIPT_EXTENSIONS` e não em
        `EXCLUDED_EXTENSIONS`.

    Limites explícitos:
        - Decide apenas pelo nome; não consulta o sistema de arquivos
    """
    ext = os.path.splitext(os.fspath(filename))[1]
    return ext in SCRIPT_EXTENSIONS and ext not in EXCLUDED_EXTENSIONS


def try_read_dir(directory: Union[str, Path]) -> List[str]:
    """
    Lista os nomes de entradas de `directory`, sem levantar exceções.

    Args:
        directory (Union[str, Path]): Diretório a listar.

    Returns:
        List[str]: Nomes das entradas, na ordem do sistema operacional;
        ``[]`` se o diretório não existir ou não puder ser lido.

    Limites explícitos:
        - Não ordena nem filtra as entradas
    """
    try:
        return os.listdir(directory)
    except OSError:
        return []


def list_scripts(directory: Union[str, Path]) -> List[Path]:
    """
    Lista os scripts de `directory`, em ordem estável.

    Args:
        directory (Union[str, Path]): Caminho do diretório.

    Returns:
        List[Path]: Caminhos absolutos dos scripts. Diretório inexistente
        ou ilegível produz lista vazia.

    Raises:
        ValueError: Se `directory` for vazio.
    """
    if not directory:
        raise ValueError("cannot list directory contents without directory name")

    files = sorted(try_read_dir(directory), key=str.lower)

    results: List[Path] = []
    for filename in files:
        if filename == ENTRY_POINT_FILENAME or filename.startswith("_"):
            continue

        filepath = Path(os.path.abspath(os.path.join(directory, filename)))

        if not filepath.is_file():
            logger.debug("Skipping directory %s", filepath)
            continue

        if is_script_extension(filename):
            results.append(filepath)
        else:
            logger.debug("Skipping file %s - unknown extension", filepath)

    return results
