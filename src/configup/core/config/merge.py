# src/configup/core/config/merge.py
"""
Motor de deep-merge de camadas de configuração.

Este módulo implementa a política de merge utilizada para aplicar uma
camada de configuração (local, ambiente, overrides) sobre o valor
acumulado a partir do arquivo master.

Política de merge:
    - dict → merge recursivo por chave
    - list → merge posicional; tamanhos devem ser idênticos
    - escalar → sobrescrita direta (inclusive por None)
    - valor acumulado None/ausente → substituição por qualquer valor
    - conflito de tipos → conflito estrutural explícito

Princípios fundamentais:
    - O primeiro conflito interrompe o merge (fail-fast)
    - O destino é mutado in-place; a camada de entrada nunca é mutada
    - A compatibilidade é decidida pelo discriminante `ValueKind`

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não realiza coerção de tipos
    - Não levanta exceções: conflitos são devolvidos como `MergeConflict`
      e convertidos em erro pelo loader
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .values import ValueKind, kind_of


class ConflictKind(str, Enum):
    INCOMPATIBLE_TYPES = "incompatible_types"
    ARRAY_LENGTH = "array_length"


@dataclass(frozen=True)
class MergeConflict:
    """
    Primeiro conflito encontrado durante um merge.

    Attributes:
        kind (ConflictKind): Natureza do conflito.
        key_path (str): Caminho completo da chave, com `.` para chaves de
            mapa e `[i]` para índices de lista (ex.: ``a.b[2].c``).
    """

    kind: ConflictKind
    key_path: str

    @property
    def message(self) -> str:
        if self.kind is ConflictKind.ARRAY_LENGTH:
            return (
                "Cannot merge array values of different length"
                f" for the option '{self.key_path}'."
            )
        return (
            "Cannot merge values of incompatible types"
            f" for the option '{self.key_path}'."
        )

    def __str__(self) -> str:
        return self.message


Container = Union[Dict[str, Any], List[Any]]


def has_compatible_type(orig_value: Any, new_value: Any) -> bool:
    """
    Indica se `new_value` pode ser aplicado sobre `orig_value`.

    Regras:
        - origem None aceita qualquer valor
        - origem lista exige lista
        - origem dict exige dict ou None
        - origem escalar exige escalar ou None

    Listas e dicts nunca são compatíveis entre si.
    """
    orig_kind = kind_of(orig_value)
    new_kind = kind_of(new_value)

    if orig_kind is ValueKind.NULL:
        return True

    if orig_kind is ValueKind.SEQUENCE:
        return new_kind is ValueKind.SEQUENCE

    if orig_kind is ValueKind.MAPPING:
        return new_kind in (ValueKind.MAPPING, ValueKind.NULL)

    return new_kind in (ValueKind.SCALAR, ValueKind.NULL)


def merge_objects(
    target: Dict[str, Any],
    incoming: Dict[str, Any],
    key_prefix: str = "",
) -> Optional[MergeConflict]:
    """
    Aplica todas as chaves de `incoming` sobre `target`, in-place.

    As chaves são visitadas na ordem de inserção de `incoming`. O primeiro
    conflito interrompe o processo e é devolvido; chaves já visitadas
    permanecem aplicadas em `target`.

    Args:
        target (Dict[str, Any]): Valor acumulado (mutado).
        incoming (Dict[str, Any]): Camada a aplicar (não mutada).
        key_prefix (str): Caminho da chave-pai, usado nas mensagens.

    Returns:
        Optional[MergeConflict]: O primeiro conflito, ou None em caso de sucesso.
    """
    for key in incoming:
        full_key = f"{key_prefix}.{key}" if key_prefix else str(key)
        conflict = merge_value(target, incoming, key, full_key)
        if conflict is not None:
            return conflict
    return None


def merge_value(
    target: Container,
    incoming: Container,
    key: Union[str, int],
    full_key: str,
) -> Optional[MergeConflict]:
    """
    Aplica `incoming[key]` sobre `target[key]`.

    `target` e `incoming` são ambos dicts (chave `str`) ou ambos listas
    (índice `int`). A estratégia é escolhida pelo tipo do valor *atual*
    em `target`.
    """
    orig_value = _get(target, key)
    new_value = incoming[key]

    if not has_compatible_type(orig_value, new_value):
        return MergeConflict(ConflictKind.INCOMPATIBLE_TYPES, full_key)

    orig_kind = kind_of(orig_value)

    if orig_kind is ValueKind.SEQUENCE:
        return merge_arrays(orig_value, new_value, full_key)

    if orig_kind is ValueKind.MAPPING and new_value is not None:
        return merge_objects(orig_value, new_value, full_key)

    target[key] = deepcopy(new_value)
    return None


def merge_arrays(
    target: List[Any],
    incoming: List[Any],
    key_prefix: str,
) -> Optional[MergeConflict]:
    """
    Mescla duas listas posição a posição.

    Listas de tamanhos diferentes geram conflito `ARRAY_LENGTH`; cada
    posição é então aplicada via `merge_value` com sufixo ``[i]``.
    """
    if len(target) != len(incoming):
        return MergeConflict(ConflictKind.ARRAY_LENGTH, key_prefix)

    for ix in range(len(target)):
        conflict = merge_value(target, incoming, ix, f"{key_prefix}[{ix}]")
        if conflict is not None:
            return conflict

    return None


def _get(container: Container, key: Union[str, int]) -> Any:
    if isinstance(container, dict):
        return container.get(key)
    return container[key]
