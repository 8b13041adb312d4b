# src/whisk_props/core/props/errors.py
"""
Exceções canônicas da camada de propriedades do whisk-props.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a leitura de fontes, a validação e a montagem da configuração final.

Existem dois grupos bem distintos:
    - erros de validação (`MissingURLError`, `MissingAuthError`), os únicos
      visíveis ao usuário, sempre **retornados** pelo resolver
    - erros de leitura de fonte (arquivo ausente, formato, root inválido),
      retornados por `StructuredConfigReader.load()` e convertidos em
      fonte vazia pelo resolver

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Mensagens de validação são fixas e estáveis
    - Nenhuma exceção é usada como controle de fluxo entre camadas

Invariantes:
    - Todas as exceções do pacote herdam de `PropsError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do resolver nem dos leitores
"""

MISSING_URL_MESSAGE = "OpenWhisk API host is missing"
MISSING_AUTH_MESSAGE = "Authentication key is missing"


class PropsError(Exception):
    """
    Exceção base para erros relacionados às propriedades de conexão.

    Esta hierarquia permite:
        - captura genérica de qualquer falha do whisk-props
        - distinção clara entre falha de fonte e falha de validação
    """


class MissingURLError(PropsError):
    """
    O host da API não foi fornecido por nenhuma fonte.

    Decisões arquiteturais:
        - Tem precedência sobre `MissingAuthError`
        - Quando presente, é o único erro reportado (validação não acumula)
    """

    def __init__(self, message: str = MISSING_URL_MESSAGE) -> None:
        super().__init__(message)


class MissingAuthError(PropsError):
    """A chave de autenticação não foi fornecida por nenhuma fonte."""

    def __init__(self, message: str = MISSING_AUTH_MESSAGE) -> None:
        super().__init__(message)


class PropsFileNotFoundError(PropsError):
    """
    Nenhum dos caminhos candidatos de arquivo estruturado existe.

    Limites explícitos:
        - Não é fatal: o resolver trata como fonte vazia
    """


class UnsupportedPropsFormatError(PropsError):
    """
    O conteúdo do arquivo não pôde ser interpretado no formato esperado.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
        - KEY=VALUE (qualquer outra extensão, incluindo `.wskprops`)
    """


class InvalidPropsRootTypeError(PropsError):
    """
    O conteúdo raiz de um arquivo YAML/JSON não é um mapa chave-valor.

    Invariantes:
        - Os leitores só operam sobre estruturas do tipo dicionário
    """


class ProvenanceReassignedError(PropsError):
    """
    Tentativa de sobrescrever a proveniência de um `ConnectionProperties`.

    A proveniência registra qual fonte venceu a leitura; uma vez definida,
    não pode ser alterada.
    """
