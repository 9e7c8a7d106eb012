# src/configup/core/__init__.py
"""
Core do configup.

Componentes principais:
    - config → descoberta, parse e merge de configuração em camadas
    - paths  → resolução de caminhos e listagem de scripts da aplicação

O core depende apenas do filesystem local e das bibliotecas de parse
(json5, PyYAML); não possui estado global.
"""
