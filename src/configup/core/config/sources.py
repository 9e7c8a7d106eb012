# src/configup/core/config/sources.py
"""
Leitura e parse de fontes de configuração.

Cada arquivo descoberto é transformado em um `ConfigSource`: o caminho
absoluto do arquivo (proveniência, usada nas mensagens de erro) e o valor
estruturado carregado. A proveniência nunca aparece como chave no valor.

Formatos suportados:
    - JSON e JSON5 (.json, .json5) via `json5`
    - YAML (.yaml, .yml) via PyYAML (`yaml.safe_load`)
    - Script Python (.py), que deve expor `config` no nível do módulo

Invariantes:
    - O valor raiz de toda fonte é um dict
    - Falhas de parse ou avaliação são sempre `ConfigParseError`
      encadeadas à exceção original

Limites explícitos:
    - Não decide quais arquivos carregar (ver `discovery`)
    - Não realiza merge
"""

from __future__ import annotations

import importlib.util
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List

import json5
import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)

logger = logging.getLogger(__name__)

SCRIPT_EXTENSION = ".py"
SCRIPT_CONFIG_ATTRIBUTE = "config"


@dataclass(frozen=True)
class ConfigSource:
    """
    Uma camada de configuração já carregada.

    Attributes:
        path (Path): Caminho absoluto do arquivo de origem.
        value (Dict[str, Any]): Conteúdo estruturado do arquivo.
    """

    path: Path
    value: Dict[str, Any]


def _parse_json5(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        return json5.load(f)


def _parse_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    # documento YAML vazio
    return {} if data is None else data


def _evaluate_script(path: Path) -> Any:
    """
    Executa um script Python de configuração e devolve seu `config`.

    O módulo é carregado isoladamente (não é registrado em `sys.modules`).
    `config` pode ser o próprio valor ou uma função sem argumentos que o
    produz.
    """
    module_name = "_configup_" + re.sub(r"\W", "_", path.stem)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot create module spec for {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    if not hasattr(module, SCRIPT_CONFIG_ATTRIBUTE):
        raise AttributeError(
            f"script does not define a top-level `{SCRIPT_CONFIG_ATTRIBUTE}`"
        )

    value = getattr(module, SCRIPT_CONFIG_ATTRIBUTE)
    if callable(value):
        value = value()
    return value


PARSERS: Dict[str, Callable[[Path], Any]] = {
    ".json": _parse_json5,
    ".json5": _parse_json5,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
    SCRIPT_EXTENSION: _evaluate_script,
}

DATA_EXTENSIONS = tuple(ext for ext in PARSERS if ext != SCRIPT_EXTENSION)


def load_source(path: Path) -> ConfigSource:
    """
    Carrega um arquivo de configuração como `ConfigSource`.

    Args:
        path (Path): Caminho do arquivo.

    Returns:
        ConfigSource: Fonte carregada, com proveniência.

    Raises:
        UnsupportedConfigFormatError: Se a extensão não possuir parser.
        ConfigParseError: Se o arquivo não puder ser lido, parseado ou avaliado.
        InvalidConfigRootTypeError: Se a raiz não for um dict.
    """
    path = Path(path)
    parser = PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(f"Unsupported config format: {path}")

    try:
        data = parser(path)
    except Exception as exc:  # noqa: BLE001
        raise ConfigParseError(f"Cannot load {path}: {exc}", path=path) from exc

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root in {path} must be a mapping, got: {type(data).__name__}"
        )

    logger.debug("loaded config file %s: %r", path, data)
    return ConfigSource(path=path, value=data)


def load_sources(paths: Iterable[Path]) -> List[ConfigSource]:
    """
    Carrega cada caminho de `paths` com `load_source`, preservando a ordem.

    Args:
        paths (Iterable[Path]): Arquivos em ordem de precedência.

    Returns:
        List[ConfigSource]: Uma fonte por arquivo, na mesma ordem.

    Limites explícitos:
        - Fail-fast: o primeiro erro de `load_source` interrompe a carga
        - Não realiza merge
    """
    return [load_source(p) for p in paths]
