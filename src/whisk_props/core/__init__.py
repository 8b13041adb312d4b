# src/whisk_props/core/__init__.py
"""
Core do whisk-props.

Este pacote reúne a implementação canônica da resolução de propriedades
de conexão, independente de CLI, transporte HTTP ou qualquer adapter.

O core é projetado para ser:
    - síncrono e sem estado global
    - testável de forma isolada (leitores de fonte são injetáveis)
    - explícito quanto à precedência entre fontes

Componentes principais:
    - props → leitores de fonte, merge, validação e montagem da config final
"""
