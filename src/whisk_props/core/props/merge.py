# src/whisk_props/core/props/merge.py
"""
Merge canônico de propriedades de conexão.

Este módulo implementa a política oficial de merge entre o record vindo
do arquivo estruturado e o record vindo do arquivo legado.

Política de merge (v1):
    - campo a campo, o valor estruturado é preferido
    - se o valor estruturado for o sentinela "não definido" do campo,
      o valor legado é usado
    - sentinelas:
        - namespace   → "" ou DEFAULT_NAMESPACE
        - api_version → "" ou DEFAULT_VERSION
        - demais      → ""

Isto **não** é "primeiro não-vazio vence". O leitor legado substitui
namespace e versão pelos defaults quando ausentes; o merge precisa
reconhecer esses defaults como "não definido" do lado estruturado para
que um valor explícito do legado não seja mascarado.

Princípios fundamentais:
    - O merge é puramente funcional
    - Nenhum input é mutado

Limites explícitos:
    - Não lê fontes
    - Não valida campos obrigatórios
"""

from __future__ import annotations

from dataclasses import fields
from typing import Dict, FrozenSet

from .constants import DEFAULT_NAMESPACE, DEFAULT_VERSION
from .types import ConnectionProperties, Provenance


_UNSET: Dict[str, FrozenSet[str]] = {
    "namespace": frozenset({"", DEFAULT_NAMESPACE}),
    "api_version": frozenset({"", DEFAULT_VERSION}),
}
_EMPTY: FrozenSet[str] = frozenset({""})


def is_unset(field_name: str, value: str) -> bool:
    """Indica se `value` é o sentinela "não definido" de `field_name`."""
    return value in _UNSET.get(field_name, _EMPTY)


def merge_properties(
    structured: ConnectionProperties,
    legacy: ConnectionProperties,
) -> ConnectionProperties:
    """
    Mescla dois records, com precedência do estruturado.

    Decisões arquiteturais:
        - A proveniência do resultado é a da fonte que forneceu `api_host`
        - Se nenhuma fonte forneceu host, a proveniência é `Provenance.NONE`

    Args:
        structured (ConnectionProperties): Record do arquivo estruturado.
        legacy (ConnectionProperties): Record do arquivo legado.

    Returns:
        ConnectionProperties: Novo record resultante do merge.
    """
    merged = ConnectionProperties()

    for f in fields(ConnectionProperties):
        if f.name == "provenance":
            continue
        value = getattr(structured, f.name)
        if is_unset(f.name, value):
            value = getattr(legacy, f.name)
        setattr(merged, f.name, value)

    if structured.api_host:
        merged.provenance = structured.provenance
    elif legacy.api_host:
        merged.provenance = legacy.provenance
    else:
        merged.provenance = Provenance.NONE

    return merged
