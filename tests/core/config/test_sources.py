# tests/core/config/test_sources.py
"""
Testes do parse de fontes de configuração (`load_source`).

Os testes asseguram que:
- JSON e JSON5 são lidos pelo mesmo parser (superset)
- YAML é lido com `safe_load` e documentos vazios viram ``{}``
- scripts Python expõem `config` como valor ou função
- formatos desconhecidos, erros de sintaxe e raízes não-dict falham
  com exceções tipadas

Limites explícitos:
    - Não valida descoberta de arquivos
    - Não valida merge
"""

from pathlib import Path

import pytest

from configup.core.config.errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from configup.core.config.sources import ConfigSource, load_source, load_sources


def test_load_json(write_config, datasources_master_json):
    path = write_config("datasources.json", datasources_master_json)

    source = load_source(path)

    assert isinstance(source, ConfigSource)
    assert source.path == path
    assert source.value["db"]["port"] == 5432
    assert source.value["timeout"] is None


def test_load_json5_with_comments(write_config, datasources_local_json5):
    path = write_config("datasources.local.json5", datasources_local_json5)

    source = load_source(path)

    assert source.value == {
        "db": {"host": "127.0.0.1", "replicas": ["local-r1", "local-r2"]},
        "debug": True,
    }


def test_json_extension_accepts_json5_syntax(write_config):
    """Arquivos ``.json`` também são lidos como JSON5."""
    path = write_config("app.json", "{ name: 'demo', }")

    assert load_source(path).value == {"name": "demo"}


def test_load_yaml(write_config, datasources_overrides_yaml):
    path = write_config("datasources.overrides.yaml", datasources_overrides_yaml)

    assert load_source(path).value == {"db": {"port": 6543}, "timeout": 30}


def test_empty_yaml_is_empty_mapping(write_config):
    path = write_config("empty.yml", "")

    assert load_source(path).value == {}


def test_provenance_is_not_a_key(write_config):
    path = write_config("app.json", '{"a": 1}')

    source = load_source(path)

    assert list(source.value) == ["a"]


def test_load_script_with_config_value(write_config):
    path = write_config("app.local.py", "PORT = 8080\nconfig = {'port': PORT}\n")

    assert load_source(path).value == {"port": 8080}


def test_load_script_with_config_factory(write_config):
    path = write_config(
        "app.production.py",
        "def config():\n    return {'workers': [1, 2, 3]}\n",
    )

    assert load_source(path).value == {"workers": [1, 2, 3]}


def test_script_without_config_fails(write_config):
    path = write_config("app.local.py", "something_else = 1\n")

    with pytest.raises(ConfigParseError) as exc_info:
        load_source(path)

    assert exc_info.value.path == path
    assert isinstance(exc_info.value.__cause__, AttributeError)


def test_script_raising_fails_with_parse_error(write_config):
    path = write_config("app.local.py", "raise RuntimeError('boom')\n")

    with pytest.raises(ConfigParseError) as exc_info:
        load_source(path)

    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_invalid_json_fails(write_config):
    """
    Verifica que erros de sintaxe são fatais e identificam o arquivo.

    Invariantes:
        - A exceção é `ConfigParseError`
        - A mensagem contém o caminho do arquivo
        - A exceção original é encadeada
    """
    path = write_config("broken.json", '{"a": ')

    with pytest.raises(ConfigParseError) as exc_info:
        load_source(path)

    assert str(path) in str(exc_info.value)
    assert exc_info.value.__cause__ is not None


def test_invalid_yaml_fails(write_config):
    path = write_config("broken.yaml", "a: [1, 2\n")

    with pytest.raises(ConfigParseError):
        load_source(path)


def test_list_root_is_rejected(write_config):
    path = write_config("list.yaml", "- just\n- a\n- list\n")

    with pytest.raises(InvalidConfigRootTypeError):
        load_source(path)


def test_unsupported_extension(write_config):
    path = write_config("app.toml", "a = 1\n")

    with pytest.raises(UnsupportedConfigFormatError):
        load_source(path)


def test_missing_file_is_parse_error(config_dir: Path):
    with pytest.raises(ConfigParseError):
        load_source(config_dir / "missing.json")


def test_load_sources_keeps_order(write_config):
    first = write_config("a.json", '{"n": 1}')
    second = write_config("b.yaml", "n: 2\n")

    sources = load_sources([second, first])

    assert [s.path for s in sources] == [second, first]
    assert [s.value["n"] for s in sources] == [2, 1]
