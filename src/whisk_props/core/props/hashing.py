# src/whisk_props/core/props/hashing.py
"""
Fingerprint canônico de propriedades de conexão.

O hash gerado representa a identidade de um record resolvido e é gravado
nos eventos de resolução no lugar dos valores, que incluem segredos.

Política de hashing (v1):
    - Serialização JSON canônica de `ConnectionProperties.to_dict()`
    - Ordenação estável de chaves, separadores compactos
    - Codificação UTF-8, algoritmo SHA-256

Invariantes:
    - Records equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json

from .types import ConnectionProperties


def compute_properties_hash(props: ConnectionProperties) -> str:
    """
    Gera um hash determinístico de um record de propriedades.

    Raises:
        TypeError: Se o objeto fornecido não for um `ConnectionProperties`.
    """
    if not isinstance(props, ConnectionProperties):
        raise TypeError(
            f"Hashing requer ConnectionProperties, recebido: {type(props).__name__}"
        )

    canonical_json = json.dumps(
        props.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
