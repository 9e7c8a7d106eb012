# src/configup/core/config/__init__.py
"""
Camada de configuração do configup.

Este pacote contém as estruturas e utilitários responsáveis por descobrir,
carregar e mesclar as camadas de configuração de um nome.

A configuração no configup é:
    - declarativa
    - organizada em camadas com precedência fixa
    - estritamente tipada durante o merge

Responsabilidades do pacote:
    - values    → classificação dos valores (`ValueKind`)
    - merge     → motor de deep-merge com regras de tipo e tamanho
    - sources   → parse de JSON/JSON5/YAML e avaliação de scripts
    - discovery → localização de master, local, ambiente e overrides
    - loader    → orquestração e estratégias de merge
    - errors    → hierarquia de exceções

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro
"""
