# src/configup/core/config/values.py
"""
Modelo de valores de configuração.

Um valor de configuração é dado estruturado simples:
    - None
    - escalar (str, int, float, bool ou qualquer objeto não-contêiner)
    - sequência (list)
    - mapa (dict com chaves str)

O merge não inspeciona tipos de forma ad-hoc: cada valor é classificado
uma única vez em um `ValueKind`, e toda a política de compatibilidade
é decidida a partir desse discriminante.

Invariantes:
    - `str` é sempre SCALAR, nunca SEQUENCE
    - `list` e `dict` são os únicos contêineres mutáveis reconhecidos
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    NULL = "null"
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: Any) -> ValueKind:
    """
    Classifica um valor de configuração pelo seu discriminante.

    Args:
        value (Any): Valor a classificar.

    Returns:
        ValueKind: Categoria estrutural do valor.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, list):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR
