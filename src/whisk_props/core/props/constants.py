# src/whisk_props/core/props/constants.py
"""
Nomes canônicos de chaves, arquivos, variáveis de ambiente e defaults.

Os valores aqui definidos fazem parte do contrato externo do whisk-props:
são os nomes que aparecem nos arquivos `.wskprops` e `whisk.properties`
escritos por usuários e pelo deploy do OpenWhisk.
"""

# Variáveis de ambiente
HOMEPATH = "HOME"
OPENWHISK_HOME = "OPENWHISK_HOME"
WSK_CONFIG_FILE = "WSK_CONFIG_FILE"

# Arquivos
DEFAULT_LOCAL_CONFIG = ".wskprops"
OPENWHISK_PROPERTIES = "whisk.properties"

# Chaves do arquivo estruturado
APIGW_SPACE_SUID = "APIGW_SPACE_SUID"
APIGW_TENANT_ID = "APIGW_TENANT_ID"
APIHOST = "APIHOST"
APIVERSION = "APIVERSION"
APIGW_ACCESS_TOKEN = "APIGW_ACCESS_TOKEN"
AUTH = "AUTH"
CERT = "CERT"
KEY = "KEY"
NAMESPACE = "NAMESPACE"

# Chaves do arquivo legado
OPENWHISK_HOST = "whisk.api.host.name"
OPENWHISK_PORT = "whisk.api.host.port"
OPENWHISK_PRO = "whisk.api.host.proto"
TEST_AUTH_FILE = "testing.auth"

# Defaults
DEFAULT_NAMESPACE = "_"
DEFAULT_VERSION = "v1"
DEFAULT_SCHEME = "https"
DEFAULT_API_PATH = "/api"

# campo do record -> chave no arquivo estruturado
FIELD_KEYS = {
    "apigw_space_suid": APIGW_SPACE_SUID,
    "apigw_tenant_id": APIGW_TENANT_ID,
    "api_host": APIHOST,
    "api_version": APIVERSION,
    "apigw_access_token": APIGW_ACCESS_TOKEN,
    "auth_key": AUTH,
    "cert": CERT,
    "key": KEY,
    "namespace": NAMESPACE,
}
