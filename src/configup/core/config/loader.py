# src/configup/core/config/loader.py
"""
Loader canônico de configuração em camadas.

Este módulo é responsável por descobrir, carregar e resolver a
configuração efetiva de um nome a partir de um diretório raiz.

A configuração é resolvida a partir de:
    - um arquivo master (obrigatório para que exista configuração)
    - um arquivo local (opcional)
    - um arquivo por ambiente (opcional, somente com `env`)
    - um arquivo de overrides (opcional)

Responsabilidades do módulo:
    - Orquestrar descoberta → parse → merge
    - Garantir precedência explícita entre camadas
    - Converter conflitos do motor de merge em erros de carregamento
      que identificam o arquivo de origem

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Conflitos estruturais são tratados como falhas fatais
    - Nenhum resultado parcial é devolvido em caso de erro

Invariantes:
    - O acumulador é uma cópia profunda da primeira fonte
    - O resultado é sempre um `dict` novo por chamada
    - A proveniência das fontes nunca aparece como chave no resultado

Limites explícitos:
    - Não valida semântica de domínio
    - Não persiste configuração
"""

from __future__ import annotations

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional

from .discovery import find_config_files
from .errors import (
    ArrayLengthMismatchError,
    ConfigTypeConflictError,
)
from .merge import ConflictKind, MergeConflict, merge_objects, merge_value
from .sources import ConfigSource, load_sources

logger = logging.getLogger(__name__)

MergeFn = Callable[[Dict[str, Any], ConfigSource], None]


def _raise_conflict(source: ConfigSource, conflict: MergeConflict) -> None:
    error_cls = (
        ArrayLengthMismatchError
        if conflict.kind is ConflictKind.ARRAY_LENGTH
        else ConfigTypeConflictError
    )
    raise error_cls(
        f"Cannot apply {source.path}: {conflict.message}",
        source_path=source.path,
        conflict=conflict,
    )


def deep_merge_strategy() -> MergeFn:
    """
    Estratégia padrão: deep-merge completo de cada camada.

    Chaves novas introduzidas por camadas posteriores são adicionadas;
    chaves existentes seguem as regras de `merge_objects`.

    Raises (na aplicação):
        ConfigTypeConflictError: Conflito de tipos.
        ArrayLengthMismatchError: Listas de tamanhos diferentes.
    """

    def apply(target: Dict[str, Any], source: ConfigSource) -> None:
        conflict = merge_objects(target, source.value)
        if conflict is not None:
            _raise_conflict(source, conflict)

    return apply


def strict_merge_strategy() -> MergeFn:
    """
    Estratégia estrita: somente chaves já presentes no master são atualizadas.

    Para cada chave de primeiro nível do acumulador que também exista na
    camada, o valor é aplicado com `merge_value` (mesmas regras de tipo e
    tamanho; mapas aninhados continuam em deep-merge). Chaves que existem
    apenas em camadas posteriores são ignoradas.
    """

    def apply(target: Dict[str, Any], source: ConfigSource) -> None:
        incoming = source.value
        for key in list(target):
            if key not in incoming:
                continue
            conflict = merge_value(target, incoming, key, str(key))
            if conflict is not None:
                _raise_conflict(source, conflict)

        ignored = [key for key in incoming if key not in target]
        if ignored:
            logger.debug(
                "strict merge ignored keys %s from %s", ignored, source.path
            )

    return apply


def merge_configurations(
    sources: Iterable[ConfigSource], merge_fn: MergeFn
) -> Dict[str, Any]:
    """
    Combina várias fontes em um único dict, na ordem recebida.

    A primeira fonte é copiada em profundidade e passa a ser o acumulador;
    cada fonte seguinte é aplicada com `merge_fn`.

    Args:
        sources (Iterable[ConfigSource]): Fontes em ordem de precedência.
        merge_fn (MergeFn): Estratégia de merge.

    Returns:
        Dict[str, Any]: Configuração resultante (``{}`` sem fontes).
    """
    iterator = iter(sources)
    first = next(iterator, None)
    result: Dict[str, Any] = deepcopy(first.value) if first is not None else {}

    for source in iterator:
        merge_fn(result, source)

    return result


def _load_named(
    root_dir: Path,
    name: str,
    env: Optional[str],
    merge_fn: MergeFn,
    allow_scripts: bool,
) -> Optional[Dict[str, Any]]:
    files = find_config_files(root_dir, name, env, allow_scripts=allow_scripts)
    if not files:
        return None

    logger.debug("found %s %s files", env, name)
    for f in files:
        logger.debug("  %s", f)

    sources = load_sources(files)
    merged = merge_configurations(sources, merge_fn)

    logger.debug("merged %s %s configuration %r", env, name, merged)
    return merged


def load(
    root_dir: Path,
    name: str,
    *,
    env: Optional[str] = None,
    merge: Optional[MergeFn] = None,
    allow_scripts: bool = True,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração `name` a partir de `root_dir`.

    Política de resolução:
        - master → local → ambiente → overrides
        - cada camada vence a anterior, exceto quando o merge é proibido
          pelas regras de tipo/tamanho, caso em que todo o carregamento falha
        - sem master, devolve ``{}``

    Decisões arquiteturais:
        - Nenhum estado global é mantido entre chamadas
        - A estratégia de merge é substituível pelo chamador
        - Scripts ``.py`` podem ser desabilitados com `allow_scripts=False`

    Args:
        root_dir (Path): Diretório onde procurar os arquivos.
        name (str): Nome da configuração, sem extensão.
        env (Optional[str]): Ambiente a aplicar (ex.: ``production``).
        merge (Optional[MergeFn]): Estratégia de merge; padrão
            `deep_merge_strategy()`.
        allow_scripts (bool): Permite camadas ``.py``.

    Returns:
        Dict[str, Any]: Configuração final resolvida.

    Raises:
        ConfigParseError: Se alguma fonte não puder ser carregada.
        InvalidConfigRootTypeError: Se a raiz de uma fonte não for dict.
        ConfigMergeError: Se ocorrer conflito estrutural durante o merge.
    """
    merge_fn = merge or deep_merge_strategy()
    merged = _load_named(root_dir, name, env, merge_fn, allow_scripts)
    return {} if merged is None else merged


def load_deep_merge(
    root_dir: Path,
    name: str,
    env: Optional[str] = None,
    *,
    strict: bool = False,
) -> Optional[Dict[str, Any]]:
    """
    Modo legado de carregamento com deep-merge.

    Difere de `load` em dois pontos: devolve None quando não existe
    master, e aceita `strict` para restringir o merge às chaves do master.
    """
    merge_fn = strict_merge_strategy() if strict else deep_merge_strategy()
    return _load_named(root_dir, name, env, merge_fn, allow_scripts=True)
