# src/whisk_props/core/props/__init__.py
"""
Camada de propriedades de conexão do whisk-props.

Este pacote contém as estruturas e utilitários responsáveis por ler,
mesclar, validar e consolidar as propriedades de conexão usadas por um
cliente OpenWhisk.

A resolução no whisk-props é:
    - ordenada (arquivo estruturado > arquivo legado > defaults)
    - tolerante a fontes ausentes (arquivo inexistente = fonte vazia)
    - rígida apenas nos dois campos obrigatórios (host e auth)

Responsabilidades do pacote:
    - Leitura de fontes (ambiente, `.wskprops`, `whisk.properties`)
    - Merge campo a campo com detecção de valores default
    - Validação dos campos obrigatórios
    - Montagem da configuração final consumida pelo cliente HTTP

Invariantes:
    - Erros de leitura de fonte nunca são propagados
    - Apenas a validação final produz erros visíveis ao usuário
    - Erros de validação são retornados, não levantados

Limites explícitos:
    - Não implementa transporte HTTP nem TLS
    - Não realiza retry ou timeout
    - Não interpreta argumentos de CLI
"""

from .errors import (
    InvalidPropsRootTypeError,
    MissingAuthError,
    MissingURLError,
    PropsError,
    PropsFileNotFoundError,
    ProvenanceReassignedError,
    UnsupportedPropsFormatError,
)
from .types import ConnectionProperties, Provenance, ResolvedConfig
from .sources import (
    EmptySource,
    EnvironmentReader,
    LegacyPropertiesReader,
    SourceReader,
    StructuredConfigReader,
    read_properties_file,
)
from .merge import merge_properties
from .hashing import compute_properties_hash
from .context import ResolutionContext
from .resolver import (
    PropertiesResolver,
    build_config,
    config_from_legacy_properties,
    config_from_structured_config,
    default_config,
    resolve_first_valid,
    resolve_from_legacy_properties,
    resolve_from_structured_config,
    resolve_properties,
    validate_properties,
)

__all__ = [
    "ConnectionProperties",
    "EmptySource",
    "EnvironmentReader",
    "InvalidPropsRootTypeError",
    "LegacyPropertiesReader",
    "MissingAuthError",
    "MissingURLError",
    "PropertiesResolver",
    "PropsError",
    "PropsFileNotFoundError",
    "Provenance",
    "ProvenanceReassignedError",
    "ResolutionContext",
    "ResolvedConfig",
    "SourceReader",
    "StructuredConfigReader",
    "UnsupportedPropsFormatError",
    "build_config",
    "compute_properties_hash",
    "config_from_legacy_properties",
    "config_from_structured_config",
    "default_config",
    "merge_properties",
    "read_properties_file",
    "resolve_first_valid",
    "resolve_from_legacy_properties",
    "resolve_from_structured_config",
    "resolve_properties",
    "validate_properties",
]
