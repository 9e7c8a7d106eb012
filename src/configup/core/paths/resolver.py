# src/configup/core/paths/resolver.py
"""
Resolução de referências de caminho contra o diretório da aplicação.

Uma referência pode ser:
    - absoluta (``/opt/app/boot.py``) → usada como está
    - relativa (``./boot``, ``../shared/boot``) → resolvida contra `root_dir`
    - no estilo módulo (``pacote/boot``) → procurada no search path
      (`sys.path` por padrão); com `strict=False` é tentada antes como
      relativa a `root_dir`

Resolução de arquivo:
    Um caminho existente (arquivo ou diretório) é aceito como está. Caso
    contrário são tentadas as extensões de `RESOLVE_EXTENSIONS` e, para
    diretórios, o ``__init__.py`` do pacote.

Limites explícitos:
    - Não importa nem executa os arquivos resolvidos
    - Não segue links simbólicos (caminhos são apenas normalizados)
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .errors import PathNotFoundError
from .scripts import ENTRY_POINT_FILENAME, is_script_extension, try_read_dir

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

RESOLVE_EXTENSIONS: Sequence[str] = (".py", ".json", ".json5", ".yaml", ".yml")


def _resolve_file(path: str) -> Optional[str]:
    if os.path.isfile(path):
        return path
    for ext in RESOLVE_EXTENSIONS:
        if os.path.isfile(path + ext):
            return path + ext
    package_init = os.path.join(path, ENTRY_POINT_FILENAME)
    if os.path.isfile(package_init):
        return package_init
    return None


def _module_paths(search_paths: Optional[Iterable[PathLike]]) -> List[str]:
    entries = sys.path if search_paths is None else search_paths
    # "" em sys.path representa o diretório corrente
    return [os.fspath(e) or os.getcwd() for e in entries]


def try_resolve_path(
    root_dir: PathLike,
    ref: str,
    *,
    strict: bool = True,
    full_resolve: bool = True,
    search_paths: Optional[Iterable[PathLike]] = None,
) -> Optional[Path]:
    """
    Resolve `ref` sem levantar exceção.

    Args:
        root_dir (PathLike): Diretório raiz da aplicação.
        ref (str): Referência a resolver.
        strict (bool): Quando True, referências no estilo módulo são
            procuradas apenas no search path.
        full_resolve (bool): Quando False, uma referência encontrada no
            search path é devolvida sem a extensão acrescentada.
        search_paths (Optional[Iterable[PathLike]]): Search path; padrão
            `sys.path`.

    Returns:
        Optional[Path]: Caminho resolvido, ou None.
    """
    root = os.fspath(root_dir)
    full_path: Optional[str] = None
    module_relative = False

    if os.path.isabs(ref):
        full_path = ref
    elif ref.startswith("./") or ref.startswith(".."):
        full_path = os.path.abspath(os.path.join(root, ref))
    elif not strict:
        module_relative = True
        full_path = os.path.abspath(os.path.join(root, ref))

    if full_path is not None:
        if os.path.exists(full_path):
            return Path(full_path)

        resolved = _resolve_file(full_path)
        if resolved is not None:
            return Path(resolved)

        if not module_relative:
            logger.debug("Skipping %s - file not found", full_path)
            return None

    for candidate_dir in _module_paths(search_paths):
        abs_path = os.path.join(candidate_dir, ref)
        resolved = _resolve_file(abs_path)
        if resolved is not None:
            return Path(resolved if full_resolve else abs_path)
        if os.path.exists(abs_path):
            return Path(abs_path)

    logger.debug("Skipping %s - module not found", ref)
    return None


def resolve_path(
    root_dir: PathLike,
    ref: str,
    *,
    strict: bool = True,
    optional: bool = False,
    full_resolve: bool = True,
    search_paths: Optional[Iterable[PathLike]] = None,
) -> Optional[Path]:
    """
    Resolve `ref` contra `root_dir`.

    Returns:
        Optional[Path]: Caminho resolvido; None apenas quando `optional`.

    Raises:
        PathNotFoundError: Se não resolvido e `optional` for False.
    """
    resolved = try_resolve_path(
        root_dir,
        ref,
        strict=strict,
        full_resolve=full_resolve,
        search_paths=search_paths,
    )
    if resolved is None and not optional:
        raise PathNotFoundError(ref)
    return resolved


def resolve_relative_paths(
    refs: Iterable[str],
    root_dir: PathLike,
    *,
    search_paths: Optional[Iterable[PathLike]] = None,
) -> List[Path]:
    """
    Resolve uma lista de referências em modo não estrito.

    Referências não resolvidas são mantidas como recebidas, convertidas
    para `Path` sem resolução; o resultado é sempre `List[Path]`.
    """
    results: List[Path] = []
    for ref in refs:
        resolved = try_resolve_path(
            root_dir, ref, strict=False, search_paths=search_paths
        )
        if resolved is None:
            logger.debug("skipping boot script %s - unknown file", ref)
            results.append(Path(ref))
        else:
            results.append(resolved)
    return results


def _prefer_script_sibling(filepath: Path) -> Optional[Path]:
    if is_script_extension(filepath.name):
        return filepath

    stem = os.path.splitext(filepath.name)[0]
    source_dir = filepath.parent

    for name in sorted(try_read_dir(source_dir)):
        other = source_dir / name
        if (
            other.is_file()
            and is_script_extension(name)
            and os.path.splitext(name)[0] == stem
        ):
            return other
    return None


def resolve_script_path(
    root_dir: PathLike,
    ref: str,
    *,
    strict: bool = True,
    optional: bool = False,
    full_resolve: bool = True,
    search_paths: Optional[Iterable[PathLike]] = None,
) -> Optional[Path]:
    """
    Resolve `ref` preferindo um script irmão de mesmo nome.

    Se a referência resolver para ``boot.json`` e existir ``boot.py`` no
    mesmo diretório, o script é devolvido.

    Raises:
        PathNotFoundError: Se não resolvido e `optional` for False.
    """
    resolved = resolve_path(
        root_dir,
        ref,
        strict=strict,
        optional=optional,
        full_resolve=full_resolve,
        search_paths=search_paths,
    )
    if resolved is None:
        return None

    preferred = _prefer_script_sibling(resolved)
    return resolved if preferred is None else preferred
