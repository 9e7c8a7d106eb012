# src/configup/core/paths/errors.py
"""
Exceções da camada de resolução de caminhos.
"""

from __future__ import annotations


class PathNotFoundError(LookupError):
    """
    Levantada quando uma referência de caminho não pode ser resolvida.

    Attributes:
        ref (str): Referência original, como informada pelo chamador.
        code (str): Código estável do erro (``PATH_NOT_FOUND``).
    """

    code = "PATH_NOT_FOUND"

    def __init__(self, ref: str) -> None:
        super().__init__(f'Cannot resolve path "{ref}"')
        self.ref = ref
