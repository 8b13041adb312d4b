# src/whisk_props/__init__.py
"""
whisk-props — resolução de propriedades de conexão para clientes OpenWhisk.

Este pacote raiz define o namespace público do whisk-props, uma
biblioteca pequena que descobre onde está o control plane, com qual
chave autenticar e em qual namespace operar.

Fontes consultadas (em ordem de precedência):
    - arquivo estruturado de propriedades (`.wskprops`, YAML ou JSON)
    - arquivo legado de propriedades do sistema (`whisk.properties`)
    - variáveis de ambiente (descoberta de diretórios e overrides de caminho)

Arquitetura em alto nível:
    - core.props → leitores de fonte, merge, validação e montagem da config

Limites explícitos:
    - Não implementa transporte HTTP
    - Não realiza handshake TLS
    - Não interpreta argumentos de linha de comando
"""

from .core.props import (
    ConnectionProperties,
    MissingAuthError,
    MissingURLError,
    PropertiesResolver,
    Provenance,
    PropsError,
    ResolvedConfig,
    build_config,
    config_from_legacy_properties,
    config_from_structured_config,
    default_config,
    merge_properties,
    resolve_first_valid,
    resolve_from_legacy_properties,
    resolve_from_structured_config,
    resolve_properties,
    validate_properties,
)

__all__ = [
    "ConnectionProperties",
    "MissingAuthError",
    "MissingURLError",
    "PropertiesResolver",
    "Provenance",
    "PropsError",
    "ResolvedConfig",
    "build_config",
    "config_from_legacy_properties",
    "config_from_structured_config",
    "default_config",
    "merge_properties",
    "resolve_first_valid",
    "resolve_from_legacy_properties",
    "resolve_from_structured_config",
    "resolve_properties",
    "validate_properties",
]
