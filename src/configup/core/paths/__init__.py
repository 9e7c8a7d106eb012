# src/configup/core/paths/__init__.py
"""
Resolução de caminhos da aplicação.

Este pacote localiza scripts auxiliares a partir de referências
relativas, absolutas ou no estilo módulo (``pacote/modulo``), e lista
os scripts de um diretório.

Componentes:
    - resolver → `resolve_path`, `resolve_script_path`, `resolve_relative_paths`
    - scripts  → `list_scripts` e o filtro de extensões executáveis
    - errors   → `PathNotFoundError`

Limites explícitos:
    - Não importa nem executa os scripts encontrados
    - Não depende da camada de configuração
"""
