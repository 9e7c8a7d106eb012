# src/configup/core/config/discovery.py
"""
Descoberta das camadas de configuração de um nome.

Dado um diretório raiz e um nome (ex.: ``datasources``), localiza os
arquivos que compõem a configuração, na ordem de precedência
(menor → maior):

    1. master     ``<name>.json`` | ``.json5`` | ``.yaml`` | ``.yml``
    2. local      ``<name>.local.<ext>``
    3. ambiente   ``<name>.<env>.<ext>`` (somente quando `env` é informado
                  e não é ``local`` nem ``overrides``)
    4. overrides  ``<name>.overrides.<ext>``

Para as camadas 2-4 as extensões são tentadas na ordem de
`LAYER_EXTENSIONS`; o primeiro arquivo existente vence.

Decisões arquiteturais:
    - Sem master não existe configuração: o resultado é vazio
    - Camadas órfãs (local/ambiente sem master) geram apenas um warning
    - Quando vários masters coexistem, vence o primeiro de
      `MASTER_EXTENSIONS`; os demais são ignorados

Limites explícitos:
    - Não lê nem parseia arquivos
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .sources import DATA_EXTENSIONS, SCRIPT_EXTENSION

logger = logging.getLogger(__name__)

MASTER_EXTENSIONS: Sequence[str] = DATA_EXTENSIONS
LAYER_EXTENSIONS: Sequence[str] = (SCRIPT_EXTENSION,) + tuple(DATA_EXTENSIONS)

LOCAL_SUFFIX = "local"
OVERRIDES_SUFFIX = "overrides"
RESERVED_SUFFIXES = frozenset({LOCAL_SUFFIX, OVERRIDES_SUFFIX})


def _if_exists(root: Path, file_name: str) -> Optional[Path]:
    path = (root / file_name).resolve()
    return path if path.is_file() else None


def _first_existing(
    root: Path, base_name: str, extensions: Sequence[str]
) -> Optional[Path]:
    for ext in extensions:
        found = _if_exists(root, base_name + ext)
        if found is not None:
            return found
    return None


def find_master_file(root_dir: Path, name: str) -> Optional[Path]:
    """
    Localiza o arquivo master de `name`.

    Returns:
        Optional[Path]: Caminho absoluto do master, ou None se não existir.
    """
    root = Path(root_dir)
    found = (_if_exists(root, name + ext) for ext in MASTER_EXTENSIONS)
    candidates = [p for p in found if p is not None]
    if not candidates:
        return None
    if len(candidates) > 1:
        logger.debug(
            "multiple master files for %s, using %s and ignoring %s",
            name,
            candidates[0],
            ", ".join(str(c) for c in candidates[1:]),
        )
    return candidates[0]


def find_config_files(
    root_dir: Path,
    name: str,
    env: Optional[str] = None,
    *,
    allow_scripts: bool = True,
) -> List[Path]:
    """
    Busca em `root_dir` todos os arquivos de configuração de `name`.

    Args:
        root_dir (Path): Diretório onde procurar.
        name (str): Nome da configuração, sem extensão.
        env (Optional[str]): Ambiente (ex.: ``production``).
        allow_scripts (bool): Quando False, camadas ``.py`` são ignoradas.

    Returns:
        List[Path]: Caminhos absolutos, do menos para o mais prioritário.
    """
    root = Path(root_dir)
    extensions = LAYER_EXTENSIONS if allow_scripts else DATA_EXTENSIONS

    def layer(suffix: str) -> Optional[Path]:
        return _first_existing(root, f"{name}.{suffix}", extensions)

    if env in RESERVED_SUFFIXES:
        # a camada de ambiente coincidiria com local/overrides
        logger.debug("ignoring reserved env %r for %s", env, name)
        env = None

    master = find_master_file(root, name)
    if master is None:
        if layer(LOCAL_SUFFIX) is not None or (env and layer(env) is not None):
            logger.warning('Main config file "%s.json" is missing', name)
        return []

    candidates = [master, layer(LOCAL_SUFFIX)]
    if env:
        candidates.append(layer(env))
    candidates.append(layer(OVERRIDES_SUFFIX))

    return [c for c in candidates if c is not None]
