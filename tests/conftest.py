# tests/conftest.py
"""
Fixtures compartilhados para testes do whisk-props.

Este módulo define fixtures reutilizáveis que fornecem:
- valores canônicos de propriedades (host, auth, namespace...)
- fontes fake (ambiente, arquivo estruturado, arquivo legado)
- um resolver montado sobre as fontes fake
- helpers para escrever arquivos KEY=VALUE em `tmp_path`

Decisões arquiteturais:
    - Fontes fake utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - Testes de arquivo usam sempre `tmp_path`, nunca o HOME real

Invariantes:
    - Nenhuma fixture lê o ambiente real do processo
    - Dados retornados são determinísticos e isolados
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pytest


EXPECTED_HOST = "192.168.9.100"
EXPECTED_API_GW_SPACE_SUID = "32kc46b1-71f6-4ed5-8c54-816aa4f8c502"
EXPECTED_AUTH_KEY = EXPECTED_API_GW_SPACE_SUID + ":123zO3xZCLrMN6v2BKK1dXYFpXlPkccOFqm12CdAsMgRU4VrNZ9lyGVCGuMDGouh"
EXPECTED_BASE_URL = "https://" + EXPECTED_HOST + "/api"
EXPECTED_APIGW_TENANT_ID = "crn:v1:providername:public:servicename:region:a/1234567890abcdef::"


class FakeEnv:
    """Ambiente em memória com a mesma interface do EnvironmentReader."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values = dict(values or {})

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)


class FakeStructuredReader:
    """Fonte estruturada em memória; `load_error` simula soft miss."""

    def __init__(self, values: Dict[str, str], load_error: Optional[Exception] = None) -> None:
        self.values = values
        self.load_error = load_error
        self.candidates: List[Path] = []
        self.loaded_path: Optional[Path] = None

    def load(self) -> Optional[Exception]:
        return self.load_error

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)


class FakeLegacyReader:
    def __init__(self, values: Dict[str, str]) -> None:
        self.values = values

    def get(self, key: str, default: str = "") -> str:
        return self.values.get(key, default)


def write_props(path: Path, lines: Sequence[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_props_file():
    return write_props


@pytest.fixture
def fake_env():
    return FakeEnv


@pytest.fixture
def structured_values() -> Dict[str, str]:
    """
    Conteúdo canônico de um `.wskprops` completo e válido.

    Usado por:
        - Testes do resolver (leitura, merge, validação)
        - Testes de build_config
    """
    return {
        "APIHOST": EXPECTED_HOST,
        "AUTH": EXPECTED_AUTH_KEY,
        "NAMESPACE": "_",
        "APIGW_ACCESS_TOKEN": "EXPECTED_AUTH_API_KEY",
        "APIGW_TENANT_ID": EXPECTED_APIGW_TENANT_ID,
        "APIVERSION": "v1",
        "CERT": "EXPECTED_CERT",
        "KEY": "EXPECTED_KEY",
    }


@pytest.fixture
def legacy_values() -> Dict[str, str]:
    """Conteúdo canônico de um `whisk.properties` com valores distintos do estruturado."""
    return {
        "whisk.api.host.name": "localhost",
        "whisk.api.host.port": "443",
        "whisk.api.host.proto": "https",
        "AUTH": "LEGACY_SPACE:LEGACY_SECRET",
        "NAMESPACE": "legacy-namespace",
        "APIVERSION": "v2",
        "CERT": "LEGACY_CERT",
        "KEY": "LEGACY_KEY",
        "APIGW_ACCESS_TOKEN": "LEGACY_TOKEN",
    }


@pytest.fixture
def make_resolver():
    """
    Fábrica de resolvers montados sobre fontes fake.

    Args da fábrica:
        structured: valores do arquivo estruturado (None = soft miss)
        legacy: valores do arquivo legado (None = arquivo ausente)
        env: valores de ambiente (default: apenas OPENWHISK_HOME definido)
    """
    from whisk_props.core.props.context import ResolutionContext
    from whisk_props.core.props.errors import PropsFileNotFoundError
    from whisk_props.core.props.resolver import PropertiesResolver

    def _make(
        structured: Optional[Dict[str, str]] = None,
        legacy: Optional[Dict[str, str]] = None,
        env: Optional[Dict[str, str]] = None,
    ):
        def structured_factory(candidates):
            if structured is None:
                return FakeStructuredReader({}, PropsFileNotFoundError("missing"))
            return FakeStructuredReader(structured)

        def legacy_factory(path):
            return FakeLegacyReader(legacy or {})

        return PropertiesResolver(
            FakeEnv({"OPENWHISK_HOME": "/opt/openwhisk"} if env is None else env),
            structured_factory=structured_factory,
            legacy_factory=legacy_factory,
            context=ResolutionContext(resolution_id="test-resolution"),
        )

    return _make
