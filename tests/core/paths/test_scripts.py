# tests/core/paths/test_scripts.py
"""
Testes da listagem de scripts de um diretório (`list_scripts`).

Os testes asseguram que:
- apenas arquivos com extensão de script são listados
- ``__init__.py`` e arquivos iniciados por ``_`` são ignorados
- a ordem é alfabética sem distinção de maiúsculas/minúsculas
- diretório inexistente produz lista vazia
"""

from pathlib import Path

import pytest

from configup.core.paths.scripts import (
    EXCLUDED_EXTENSIONS,
    is_script_extension,
    list_scripts,
)


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("", encoding="utf-8")


def test_list_scripts_filters_and_sorts(tmp_path: Path):
    _touch(
        tmp_path,
        "b_boot.py",
        "A_first.py",
        "__init__.py",
        "_private.py",
        "data.json",
        "notes.md",
        "native.so",
        "c.py",
    )
    (tmp_path / "subdir.py").mkdir()

    scripts = list_scripts(tmp_path)

    assert [p.name for p in scripts] == ["A_first.py", "b_boot.py", "c.py"]
    assert all(p.is_absolute() for p in scripts)


def test_list_scripts_missing_directory(tmp_path: Path):
    assert list_scripts(tmp_path / "missing") == []


def test_list_scripts_requires_directory():
    with pytest.raises(ValueError):
        list_scripts("")


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("boot.py", True),
        ("boot.json", False),
        ("boot.so", False),
        ("boot.md", False),
        ("boot", False),
    ],
)
def test_is_script_extension(filename, expected):
    assert is_script_extension(filename) is expected


def test_json_is_always_excluded():
    assert ".json" in EXCLUDED_EXTENSIONS
