# src/configup/core/config/errors.py
"""
Exceções canônicas da camada de configuração do configup.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura das fontes, o parse e o deep-merge das camadas de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens identificam o arquivo de origem e a chave afetada

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhum merge parcial é devolvido quando uma exceção é levantada

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não cobre erros de resolução de caminhos (ver `core.paths.errors`)
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .merge import MergeConflict


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Todas as exceções levantadas durante descoberta, parse e merge
    de configuração devem herdar desta classe, permitindo captura
    genérica pelo chamador.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Levantada quando a extensão do arquivo não possui parser registrado.

    Formatos suportados:
        - JSON / JSON5 (.json, .json5)
        - YAML (.yaml, .yml)
        - Script Python (.py)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class ConfigParseError(ConfigError):
    """
    Levantada quando uma fonte não pode ser lida ou avaliada.

    Cobre tanto erros de sintaxe (JSON5/YAML) quanto falhas na execução
    de um script de configuração. A exceção original é sempre encadeada
    (`__cause__`) para diagnóstico.
    """

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidConfigRootTypeError(ConfigError):
    """
    Levantada quando o conteúdo raiz de uma fonte não é um mapa (`dict`).

    Decisões arquiteturais:
        - Toda camada de configuração é um mapa chave-valor
        - Listas ou escalares na raiz são inválidos
    """


class ConfigMergeError(ConfigError):
    """
    Exceção base para conflitos detectados durante o deep-merge de camadas.

    A mensagem segue o formato ``Cannot apply <arquivo>: <conflito>``,
    identificando a fonte que introduziu o valor conflitante e o caminho
    completo da chave (ex.: ``a.b[2].c``).

    Invariantes:
        - O carregamento inteiro é abortado
        - `source_path` aponta para a camada que introduziu o conflito
    """

    def __init__(
        self,
        message: str,
        *,
        source_path: Optional[Path] = None,
        conflict: Optional["MergeConflict"] = None,
    ) -> None:
        super().__init__(message)
        self.source_path = source_path
        self.conflict = conflict

    @property
    def key_path(self) -> Optional[str]:
        return self.conflict.key_path if self.conflict is not None else None


class ConfigTypeConflictError(ConfigMergeError):
    """
    Conflito de tipos entre o valor acumulado e o valor de uma camada.

    Exemplo de conflito:
        - master:    {"x": "a"}
        - overrides: {"x": {"y": 1}}
    """


class ArrayLengthMismatchError(ConfigMergeError):
    """
    Listas de tamanhos diferentes para a mesma chave.

    Listas são mescladas posição a posição; não existe append nem
    truncamento implícito.
    """
