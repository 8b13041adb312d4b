# src/whisk_props/core/props/types.py
"""
Tipos canônicos da resolução de propriedades.

Componentes principais:
    - Provenance           → enum da fonte que venceu uma leitura
    - ConnectionProperties → record mutável produzido por cada leitura
    - ResolvedConfig       → configuração final imutável para o cliente HTTP

Princípios fundamentais:
    - Tipos são simples e serializáveis
    - Nenhuma lógica de leitura ou merge vive neste módulo

Invariantes:
    - A proveniência de um record, uma vez definida, nunca é reatribuída
    - ResolvedConfig é imutável após criado

Limites explícitos:
    - Não lê arquivos nem ambiente
    - Não valida campos obrigatórios
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional

from .errors import ProvenanceReassignedError


class Provenance(str, Enum):
    """
    Fonte que populou um `ConnectionProperties`.

    Os valores são strings para facilitar serialização e inspeção.

    Valores definidos:
        - STRUCTURED_CONFIG: arquivo `.wskprops` (ou YAML/JSON equivalente)
        - LEGACY_PROPERTIES: arquivo legado `whisk.properties`
        - NONE: nenhuma fonte forneceu o record (ex.: soft miss)
    """
    STRUCTURED_CONFIG = "wsk props"
    LEGACY_PROPERTIES = "whisk properties"
    NONE = "none"


@dataclass
class ConnectionProperties:
    """
    Record mutável com as propriedades lidas de uma única resolução.

    Cada chamada de leitura cria um record novo, de propriedade do chamador.
    Campos ausentes são representados por string vazia.

    Invariantes:
        - `provenance` começa como `Provenance.NONE`
        - uma vez diferente de `NONE`, `provenance` não pode ser reatribuída
    """
    apigw_space_suid: str = ""
    apigw_tenant_id: str = ""
    api_host: str = ""
    api_version: str = ""
    apigw_access_token: str = ""
    auth_key: str = ""
    cert: str = ""
    key: str = ""
    namespace: str = ""
    provenance: Provenance = Provenance.NONE

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "provenance":
            current = self.__dict__.get("provenance", Provenance.NONE)
            if current is not Provenance.NONE and value != current:
                raise ProvenanceReassignedError(
                    f"Proveniência já definida como '{current.value}', "
                    f"recebido: '{Provenance(value).value}'"
                )
            value = Provenance(value)
        super().__setattr__(name, value)

    def to_dict(self) -> Dict[str, str]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["provenance"] = self.provenance.value
        return out


@dataclass(frozen=True)
class ResolvedConfig:
    """
    Configuração final entregue ao cliente HTTP.

    Construída uma única vez por resolução, inclusive quando a validação
    falha, para que o chamador possa inspecionar o estado parcial.

    Campos:
        - base_url: `<scheme>://<host>/api`, ou None quando não há host
        - host, version, namespace: copiados do record
        - auth_token: chave de autenticação
        - cert, key: material TLS do cliente (repassados)
        - apigw_*: credenciais do API gateway
        - verbose, debug: sempre False por default
        - insecure: sempre True por default
    """
    base_url: Optional[str]
    host: str
    auth_token: str
    namespace: str
    version: str
    cert: str
    key: str
    apigw_access_token: str = ""
    apigw_space_suid: str = ""
    apigw_tenant_id: str = ""
    provenance: Provenance = Provenance.NONE
    verbose: bool = False
    debug: bool = False
    insecure: bool = True
