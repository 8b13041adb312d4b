# src/whisk_props/core/props/sources.py
"""
Leitores de fonte (Source Readers) do whisk-props.

Este módulo define o contrato mínimo de uma fonte de propriedades e as
três implementações usadas pelo resolver:

    - EnvironmentReader       → variáveis de ambiente do processo
    - StructuredConfigReader  → `.wskprops` (KEY=VALUE), YAML ou JSON
    - LegacyPropertiesReader  → `whisk.properties` (KEY=VALUE)

Contrato comum:
    get(key, default) -> str

Princípios fundamentais:
    - Uma chave ausente nunca é erro: o default fornecido é retornado
    - Arquivos são lidos com escopo garantido (context manager)
    - Falhas de leitura não são levantadas; o leitor estruturado as
      retorna via `load()` e o legado trata como fonte vazia

Limites explícitos:
    - Não decide precedência entre fontes
    - Não aplica defaults de domínio (namespace, versão)
    - Não valida campos obrigatórios
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

import yaml  # PyYAML

from .errors import (
    InvalidPropsRootTypeError,
    PropsFileNotFoundError,
    UnsupportedPropsFormatError,
)

PathLike = Union[str, Path]


@runtime_checkable
class SourceReader(Protocol):
    """
    Contrato canônico de uma fonte de propriedades.

    A verificação ocorre em runtime (`@runtime_checkable`), o que permite
    injetar fakes por duck typing nos testes.
    """

    def get(self, key: str, default: str = "") -> str:
        """Retorna o valor da chave, ou `default` quando ausente."""
        ...


def read_properties_file(path: PathLike) -> Dict[str, str]:
    """
    Lê um arquivo no formato KEY=VALUE.

    Política de parse:
        - linhas em branco e comentários (`#`, `!`) são ignorados
        - a divisão ocorre no primeiro `=`; chave e valor são aparados
        - linhas sem `=` são ignoradas

    Raises:
        OSError: Se o arquivo não puder ser aberto.
    """
    props: Dict[str, str] = {}
    with Path(path).open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if not line or line.startswith(("#", "!")):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                continue
            props[key.strip()] = value.strip()
    return props


def _stringify(data: Mapping[str, Any]) -> Dict[str, str]:
    # YAML pode entregar int/bool; o contrato da fonte é string
    return {
        str(k): "" if v is None else str(v)
        for k, v in data.items()
    }


def _load_structured_file(path: Path) -> Dict[str, str]:
    """
    Carrega um arquivo estruturado e valida sua estrutura básica.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
        - KEY=VALUE (qualquer outra extensão)

    Raises:
        UnsupportedPropsFormatError: Se o conteúdo não puder ser interpretado.
        InvalidPropsRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise UnsupportedPropsFormatError(f"YAML inválido em {path}: {e}") from e

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise UnsupportedPropsFormatError(f"JSON inválido em {path}: {e}") from e

    else:
        return read_properties_file(path)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidPropsRootTypeError(
            f"Root do arquivo de propriedades deve ser dict, recebido: {type(data).__name__}"
        )

    return _stringify(data)


class EmptySource:
    """Fonte sem nenhuma chave; usada quando o arquivo não tem localização."""

    def get(self, key: str, default: str = "") -> str:
        return default


class EnvironmentReader:
    """Fonte baseada nas variáveis de ambiente (ou num mapa injetado)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get(self, key: str, default: str = "") -> str:
        return self._environ.get(key, default)


class StructuredConfigReader:
    """
    Fonte baseada no arquivo estruturado de propriedades.

    Recebe uma lista ordenada de caminhos candidatos; `load()` usa o
    primeiro que existir. Antes de `load()` (ou após falha) a fonte se
    comporta como vazia.

    Decisões arquiteturais:
        - `load()` retorna o erro em vez de levantá-lo (soft miss)
        - O caminho efetivamente carregado fica exposto em `loaded_path`
    """

    def __init__(self, candidates: Sequence[PathLike]) -> None:
        self.candidates = [Path(c).expanduser() for c in candidates if str(c)]
        self.loaded_path: Optional[Path] = None
        self._values: Dict[str, str] = {}

    def load(self) -> Optional[Exception]:
        """
        Carrega o primeiro candidato existente.

        Returns:
            None em caso de sucesso; caso contrário a exceção que descreve
            a falha (`PropsFileNotFoundError`, `UnsupportedPropsFormatError`,
            `InvalidPropsRootTypeError` ou `OSError`).
        """
        self._values = {}
        self.loaded_path = None

        for candidate in self.candidates:
            if not candidate.is_file():
                continue
            try:
                self._values = _load_structured_file(candidate)
            except (
                UnsupportedPropsFormatError,
                InvalidPropsRootTypeError,
                OSError,
                UnicodeDecodeError,
            ) as e:
                return e
            self.loaded_path = candidate
            return None

        searched = ", ".join(str(c) for c in self.candidates) or "<nenhum>"
        return PropsFileNotFoundError(f"Arquivo de propriedades não encontrado: {searched}")

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)


class LegacyPropertiesReader:
    """
    Fonte baseada no arquivo legado `whisk.properties`.

    O arquivo é lido uma única vez, na construção. Arquivo ausente ou
    ilegível resulta numa fonte vazia; `exists` informa qual foi o caso.
    """

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path).expanduser()
        self.exists = False
        self._values: Dict[str, str] = {}
        try:
            self._values = read_properties_file(self.path)
            self.exists = True
        except (OSError, UnicodeDecodeError):
            self._values = {}

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)
