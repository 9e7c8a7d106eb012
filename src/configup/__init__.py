# src/configup/__init__.py
"""
configup — configuração em camadas para aplicações.

Carrega uma configuração nomeada a partir de um diretório com arquivos em
camadas (master, local, ambiente e overrides), mescla as camadas com
regras estritas de tipo e tamanho, e oferece utilitários para localizar
scripts da aplicação.

Arquitetura em alto nível:
    - core.config → descoberta, parse e deep-merge de configuração
    - core.paths  → resolução de caminhos e listagem de scripts

Exemplo:
    >>> import configup
    >>> config = configup.load("config", "datasources", env="production")

Limites explícitos:
    - Não valida schema
    - Não suporta fontes remotas
"""

import logging

from .core.config.discovery import find_config_files
from .core.config.errors import (
    ArrayLengthMismatchError,
    ConfigError,
    ConfigMergeError,
    ConfigParseError,
    ConfigTypeConflictError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .core.config.loader import (
    deep_merge_strategy,
    load,
    load_deep_merge,
    merge_configurations,
    strict_merge_strategy,
)
from .core.config.merge import (
    ConflictKind,
    MergeConflict,
    has_compatible_type,
    merge_arrays,
    merge_objects,
    merge_value,
)
from .core.config.sources import ConfigSource, load_source
from .core.config.values import ValueKind, kind_of
from .core.paths.errors import PathNotFoundError
from .core.paths.resolver import (
    resolve_path,
    resolve_relative_paths,
    resolve_script_path,
    try_resolve_path,
)
from .core.paths.scripts import list_scripts

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrayLengthMismatchError",
    "ConfigError",
    "ConfigMergeError",
    "ConfigParseError",
    "ConfigSource",
    "ConfigTypeConflictError",
    "ConflictKind",
    "InvalidConfigRootTypeError",
    "MergeConflict",
    "PathNotFoundError",
    "UnsupportedConfigFormatError",
    "ValueKind",
    "deep_merge_strategy",
    "find_config_files",
    "has_compatible_type",
    "kind_of",
    "list_scripts",
    "load",
    "load_deep_merge",
    "load_source",
    "merge_arrays",
    "merge_configurations",
    "merge_objects",
    "merge_value",
    "resolve_path",
    "resolve_relative_paths",
    "resolve_script_path",
    "strict_merge_strategy",
    "try_resolve_path",
]
