# src/shrub/core/config/errors.py
"""
Exceções da camada de configuração.

Todas herdam de `ConfigError`, distinta da hierarquia do Codec
(`shrub.core.codec.errors`). Nenhuma delas é recuperada internamente:
chegam ao chamador sem fallback.
"""


class ConfigError(Exception):
    """Erro base de configuração."""


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de opções informado não existe.

    O arquivo de defaults nunca é inferido nem criado automaticamente.
    """


class UnsupportedConfigFormatError(ConfigError):
    """Extensão não suportada (aceitas: .yaml, .yml, .json)."""


class ConfigParseError(ConfigError):
    """O arquivo de opções não é YAML/JSON válido."""


class InvalidConfigRootTypeError(ConfigError):
    """A raiz do arquivo de opções não é um mapping (ex.: lista ou escalar)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipo durante o deep-merge.

    Exemplo:
        - base:     {"env": {"PATH": "/bin"}}
        - override: {"env": "inline"}
    """


class InvalidCodecOptionError(ConfigError):
    """Opção do Codec desconhecida ou com tipo inválido."""
