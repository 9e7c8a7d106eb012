# tests/conftest.py
"""
Fixtures compartilhados para testes do configup.

Este módulo define fixtures reutilizáveis que fornecem:
- um diretório de configuração temporário com helper de escrita
- conteúdos de master/local/overrides semelhantes ao uso real

Decisões arquiteturais:
    - Arquivos são escritos sob `tmp_path`, isolados por teste
    - Conteúdos são fornecidos como string para manter os testes legíveis

Invariantes:
    - Nenhuma fixture depende de variáveis de ambiente
    - Todas as fixtures são seguras para execução em paralelo
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Diretório vazio onde os testes escrevem seus arquivos de configuração."""
    directory = tmp_path / "config"
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(config_dir: Path) -> Callable[[str, str], Path]:
    """
    Fixture que fornece um helper para escrever arquivos em `config_dir`.

    Usado por:
        - Testes de descoberta de arquivos
        - Testes do loader (master + camadas)

    Returns:
        Callable[[str, str], Path]: Função ``write(filename, content)`` que
        devolve o caminho absoluto do arquivo escrito.
    """

    def write(filename: str, content: str) -> Path:
        path = config_dir / filename
        path.write_text(content, encoding="utf-8")
        return path.resolve()

    return write


@pytest.fixture
def datasources_master_json() -> str:
    """
    Fixture que fornece um master JSON semelhante ao uso real.

    Invariantes:
        - JSON sintaticamente válido
        - Contém mapas aninhados, listas e escalares
    """
    return """\
{
  "db": {
    "connector": "memory",
    "host": "localhost",
    "port": 5432,
    "replicas": ["r1", "r2"]
  },
  "debug": false,
  "timeout": null
}
"""


@pytest.fixture
def datasources_local_json5() -> str:
    """Override local em JSON5 (comentários e vírgula final)."""
    return """\
// local development overrides
{
  db: {
    host: "127.0.0.1",
    replicas: ["local-r1", "local-r2"],
  },
  debug: true,
}
"""


@pytest.fixture
def datasources_overrides_yaml() -> str:
    """Overrides finais em YAML."""
    return """\
db:
  port: 6543
timeout: 30
"""
