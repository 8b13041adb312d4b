# src/whisk_props/core/props/resolver.py
"""
Resolver canônico de propriedades de conexão do whisk-props.

Este módulo compõe os leitores de fonte na ordem de precedência oficial,
produz records `ConnectionProperties`, valida os campos obrigatórios e
monta a `ResolvedConfig` consumida pelo cliente HTTP.

Operações:
    - from_structured_config → record do arquivo estruturado (soft miss)
    - from_legacy_properties → record do arquivo legado (com defaults)
    - merge_properties       → estruturado sobre legado (ver `merge.py`)
    - validate_properties    → MissingURL antes de MissingAuth, sem acumular
    - build_config           → sempre constrói; erro reportado à parte

Pontos de entrada:
    - resolve_from_legacy_properties / config_from_legacy_properties
    - resolve_from_structured_config / config_from_structured_config
    - resolve_properties / default_config (precedência completa)
    - resolve_first_valid (fallback de record inteiro)

Princípios fundamentais:
    - Arquivo ausente é fonte vazia, nunca erro
    - Erros de validação são retornados, nunca levantados
    - Leitores são injetáveis para testes

Limites explícitos:
    - Não implementa transporte HTTP
    - Não realiza retry, timeout ou cancelamento
    - Não interpreta argumentos de CLI
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence, Tuple
from urllib.parse import urlsplit, urlunsplit

from .constants import (
    APIGW_SPACE_SUID,
    APIHOST,
    APIVERSION,
    AUTH,
    DEFAULT_API_PATH,
    DEFAULT_LOCAL_CONFIG,
    DEFAULT_NAMESPACE,
    DEFAULT_SCHEME,
    DEFAULT_VERSION,
    FIELD_KEYS,
    HOMEPATH,
    NAMESPACE,
    OPENWHISK_HOME,
    OPENWHISK_HOST,
    OPENWHISK_PORT,
    OPENWHISK_PRO,
    OPENWHISK_PROPERTIES,
    TEST_AUTH_FILE,
    WSK_CONFIG_FILE,
)
from .context import ResolutionContext
from .errors import MissingAuthError, MissingURLError, PropsError
from .hashing import compute_properties_hash
from .merge import merge_properties
from .sources import (
    EmptySource,
    EnvironmentReader,
    LegacyPropertiesReader,
    SourceReader,
    StructuredConfigReader,
)
from .types import ConnectionProperties, Provenance, ResolvedConfig


SOURCE_STRUCTURED = "structured"
SOURCE_LEGACY = "legacy"
SOURCE_MERGE = "merge"
SOURCE_VALIDATE = "validate"

# campos legados lidos pelo mesmo nome de chave do arquivo estruturado
_LEGACY_PASSTHROUGH = ("apigw_tenant_id", "apigw_access_token", "cert", "key")


class StructuredSource(Protocol):
    def load(self) -> Optional[Exception]:
        ...

    def get(self, key: str, default: str = "") -> str:
        ...


StructuredFactory = Callable[[Sequence[Path]], StructuredSource]
LegacyFactory = Callable[[Path], SourceReader]


def _space_suid_from_auth(auth_key: str) -> str:
    # a chave tem o formato "<space-uuid>:<segredo>"
    if not auth_key:
        return ""
    return auth_key.split(":", 1)[0]


def _base_url(host: str) -> Optional[str]:
    if not host:
        return None
    if "://" not in host:
        host = f"{DEFAULT_SCHEME}://{host}"
    try:
        parts = urlsplit(host.rstrip("/") + DEFAULT_API_PATH)
    except ValueError:
        # host malformado (ex.: IPv6 sem "]"): config é montada sem base URL
        return None
    return urlunsplit(parts)


def validate_properties(props: ConnectionProperties) -> Optional[PropsError]:
    """
    Valida os campos obrigatórios de um record.

    A validação não é cumulativa: interrompe no primeiro campo ausente,
    na ordem fixa (host, auth).

    Returns:
        `MissingURLError` se o host estiver vazio; senão `MissingAuthError`
        se a chave de autenticação estiver vazia; senão None.
    """
    if not props.api_host:
        return MissingURLError()
    if not props.auth_key:
        return MissingAuthError()
    return None


def build_config(
    props: ConnectionProperties,
) -> Tuple[ResolvedConfig, Optional[PropsError]]:
    """
    Monta a configuração final a partir de um record.

    A configuração é construída mesmo quando a validação falha, para que
    o chamador possa inspecionar o estado parcial e decidir se o erro é
    fatal.

    Política de base URL:
        - host vazio → `base_url` None
        - host sem esquema → `https://<host>/api`
        - host com esquema → `<host>/api`

    Returns:
        Tuple[ResolvedConfig, Optional[PropsError]]: Config e erro de validação.
    """
    config = ResolvedConfig(
        base_url=_base_url(props.api_host),
        host=props.api_host,
        auth_token=props.auth_key,
        namespace=props.namespace,
        version=props.api_version,
        cert=props.cert,
        key=props.key,
        apigw_access_token=props.apigw_access_token,
        apigw_space_suid=props.apigw_space_suid,
        apigw_tenant_id=props.apigw_tenant_id,
        provenance=props.provenance,
    )
    return config, validate_properties(props)


class PropertiesResolver:
    """
    Compõe as fontes de propriedades na ordem de precedência oficial.

    O ambiente, as fábricas de leitores e o contexto de eventos são
    injetáveis; os defaults usam o ambiente do processo e os leitores
    baseados em arquivo.

    Decisões arquiteturais:
        - Nenhum estado é compartilhado entre resoluções além do contexto
        - Cada chamada cria records novos, de propriedade do chamador
    """

    def __init__(
        self,
        env: Optional[SourceReader] = None,
        *,
        structured_factory: StructuredFactory = StructuredConfigReader,
        legacy_factory: LegacyFactory = LegacyPropertiesReader,
        context: Optional[ResolutionContext] = None,
    ) -> None:
        self.env = env if env is not None else EnvironmentReader()
        self.structured_factory = structured_factory
        self.legacy_factory = legacy_factory
        self.context = context if context is not None else ResolutionContext()

    # -----------------------------
    # Localização de arquivos
    # -----------------------------
    def structured_candidates(self, explicit_path: str = "") -> List[Path]:
        if explicit_path:
            return [Path(explicit_path)]
        override = self.env.get(WSK_CONFIG_FILE, "")
        if override:
            return [Path(override)]
        home = self.env.get(HOMEPATH, "")
        if home:
            return [Path(home) / DEFAULT_LOCAL_CONFIG]
        return []

    def legacy_path(self) -> Optional[Path]:
        # sem OPENWHISK_HOME não há arquivo legado; nunca cai no diretório corrente
        home = self.env.get(OPENWHISK_HOME, "")
        if not home:
            return None
        return Path(home) / OPENWHISK_PROPERTIES

    # -----------------------------
    # Leitura por fonte
    # -----------------------------
    def from_structured_config(self, explicit_path: str = "") -> ConnectionProperties:
        """
        Lê o record do arquivo estruturado.

        Falha de carregamento é um soft miss: o record retornado é todo
        vazio, com proveniência `Provenance.NONE`, e nenhum erro é
        propagado. Isso permite ao chamador cair para a próxima fonte.
        """
        candidates = self.structured_candidates(explicit_path)
        reader = self.structured_factory(candidates)
        err = reader.load()
        if err is not None:
            self.context.add_warning(
                source=SOURCE_STRUCTURED,
                message=f"Arquivo estruturado ignorado: {err}",
            )
            return ConnectionProperties()

        props = ConnectionProperties()
        for field_name, key in FIELD_KEYS.items():
            setattr(props, field_name, reader.get(key, ""))
        if not props.apigw_space_suid:
            props.apigw_space_suid = _space_suid_from_auth(props.auth_key)
        props.provenance = Provenance.STRUCTURED_CONFIG

        self.context.log(
            source=SOURCE_STRUCTURED,
            level="INFO",
            message="Arquivo estruturado carregado",
            path=str(getattr(reader, "loaded_path", None) or ""),
        )
        return props

    def _read_auth_secret(self, legacy_file: Path, declared: str) -> Optional[str]:
        secret = Path(declared).expanduser()
        if not secret.is_absolute():
            secret = legacy_file.parent / secret
        try:
            with secret.open("r", encoding="utf-8") as f:
                return f.read().strip()
        except (OSError, UnicodeDecodeError) as e:
            self.context.add_warning(
                source=SOURCE_LEGACY,
                message=(
                    f"Arquivo de auth declarado não pôde ser lido: {secret} "
                    f"({e.__class__.__name__})"
                ),
            )
            return None

    def from_legacy_properties(self) -> ConnectionProperties:
        """
        Lê o record do arquivo legado `$OPENWHISK_HOME/whisk.properties`.

        Política de leitura:
            - host em `whisk.api.host.name` (ou `APIHOST` inline)
            - auth lida do arquivo apontado por `testing.auth`, aparada;
              sobrepõe qualquer `AUTH` inline
            - namespace e versão recebem defaults quando ausentes
            - demais campos ausentes ficam vazios
        """
        path = self.legacy_path()
        if path is None:
            self.context.add_warning(
                source=SOURCE_LEGACY,
                message=f"{OPENWHISK_HOME} não definido; arquivo legado ignorado",
            )
            reader: SourceReader = EmptySource()
        else:
            reader = self.legacy_factory(path)

        props = ConnectionProperties()
        props.api_host = reader.get(OPENWHISK_HOST, reader.get(APIHOST, ""))
        props.namespace = reader.get(NAMESPACE, DEFAULT_NAMESPACE)
        props.api_version = reader.get(APIVERSION, DEFAULT_VERSION)
        for field_name in _LEGACY_PASSTHROUGH:
            setattr(props, field_name, reader.get(FIELD_KEYS[field_name], ""))

        # arquivo de auth declarado sempre vence o AUTH inline, mesmo ilegível
        declared = reader.get(TEST_AUTH_FILE, "")
        if declared and path is not None:
            secret = self._read_auth_secret(path, declared)
            auth_key = secret if secret is not None else ""
        else:
            auth_key = reader.get(AUTH, "")
        props.auth_key = auth_key
        props.apigw_space_suid = reader.get(APIGW_SPACE_SUID, _space_suid_from_auth(auth_key))
        props.provenance = Provenance.LEGACY_PROPERTIES

        self.context.log(
            source=SOURCE_LEGACY,
            level="INFO",
            message="Arquivo legado lido",
            path=str(path) if path is not None else "",
            host=props.api_host,
            port=reader.get(OPENWHISK_PORT, ""),
            protocol=reader.get(OPENWHISK_PRO, ""),
        )
        return props

    # -----------------------------
    # Pontos de entrada
    # -----------------------------
    def _validated(
        self, props: ConnectionProperties
    ) -> Tuple[ConnectionProperties, Optional[PropsError]]:
        err = validate_properties(props)
        self.context.log(
            source=SOURCE_VALIDATE,
            level="INFO" if err is None else "ERROR",
            message="ok" if err is None else str(err),
            provenance=props.provenance.value,
            fingerprint=compute_properties_hash(props),
        )
        return props, err

    def resolve_from_legacy_properties(self) -> Tuple[ConnectionProperties, Optional[PropsError]]:
        return self._validated(self.from_legacy_properties())

    def resolve_from_structured_config(
        self, explicit_path: str = ""
    ) -> Tuple[ConnectionProperties, Optional[PropsError]]:
        return self._validated(self.from_structured_config(explicit_path))

    def resolve_properties(
        self, explicit_path: str = ""
    ) -> Tuple[ConnectionProperties, Optional[PropsError]]:
        """
        Resolve com precedência completa: estruturado sobre legado.

        Returns:
            O record mesclado e o erro de validação (ou None).
        """
        structured = self.from_structured_config(explicit_path)
        legacy = self.from_legacy_properties()
        merged = merge_properties(structured, legacy)
        self.context.log(
            source=SOURCE_MERGE,
            level="INFO",
            message="Records mesclados",
            provenance=merged.provenance.value,
        )
        return self._validated(merged)

    def resolve_first_valid(
        self, explicit_path: str = ""
    ) -> Tuple[ConnectionProperties, Optional[PropsError]]:
        """
        Resolve por fallback de record inteiro.

        O record estruturado é usado se for válido. Caso contrário o
        record legado é usado, desde que seja válido; se nenhum for, o
        record estruturado é retornado com o seu próprio erro.
        """
        structured, err = self.resolve_from_structured_config(explicit_path)
        if err is None:
            return structured, None

        legacy, legacy_err = self.resolve_from_legacy_properties()
        if legacy_err is None:
            return legacy, None
        return structured, err

    def config_from_legacy_properties(self) -> Tuple[ResolvedConfig, Optional[PropsError]]:
        return build_config(self.from_legacy_properties())

    def config_from_structured_config(
        self, explicit_path: str = ""
    ) -> Tuple[ResolvedConfig, Optional[PropsError]]:
        return build_config(self.from_structured_config(explicit_path))

    def default_config(
        self, explicit_path: str = ""
    ) -> Tuple[ResolvedConfig, Optional[PropsError]]:
        merged, _ = self.resolve_properties(explicit_path)
        return build_config(merged)


def resolve_from_legacy_properties(
    env: Optional[SourceReader] = None,
) -> Tuple[ConnectionProperties, Optional[PropsError]]:
    return PropertiesResolver(env).resolve_from_legacy_properties()


def resolve_from_structured_config(
    explicit_path: str = "", env: Optional[SourceReader] = None
) -> Tuple[ConnectionProperties, Optional[PropsError]]:
    return PropertiesResolver(env).resolve_from_structured_config(explicit_path)


def resolve_properties(
    explicit_path: str = "", env: Optional[SourceReader] = None
) -> Tuple[ConnectionProperties, Optional[PropsError]]:
    return PropertiesResolver(env).resolve_properties(explicit_path)


def resolve_first_valid(
    explicit_path: str = "", env: Optional[SourceReader] = None
) -> Tuple[ConnectionProperties, Optional[PropsError]]:
    return PropertiesResolver(env).resolve_first_valid(explicit_path)


def config_from_legacy_properties(
    env: Optional[SourceReader] = None,
) -> Tuple[ResolvedConfig, Optional[PropsError]]:
    return PropertiesResolver(env).config_from_legacy_properties()


def config_from_structured_config(
    explicit_path: str = "", env: Optional[SourceReader] = None
) -> Tuple[ResolvedConfig, Optional[PropsError]]:
    return PropertiesResolver(env).config_from_structured_config(explicit_path)


def default_config(
    explicit_path: str = "", env: Optional[SourceReader] = None
) -> Tuple[ResolvedConfig, Optional[PropsError]]:
    """Config final com precedência completa; ponto de entrada usual."""
    return PropertiesResolver(env).default_config(explicit_path)
