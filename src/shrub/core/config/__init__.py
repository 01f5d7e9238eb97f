# src/shrub/core/config/__init__.py
"""
Camada de configuração do shrub.

Responsabilidades do pacote:
    - Opções de formatação e tolerância do Codec (`CodecOptions`)
    - Carregamento de arquivos de opções (defaults + overrides locais)
    - Deep-merge determinístico, reutilizado na precedência de escopos

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Nenhuma heurística implícita durante merge
    - A mesma entrada sempre produz a mesma configuração final
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigParseError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidCodecOptionError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .loader import load_codec_options  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .options import DEFAULT_OPTIONS, CodecOptions  # noqa: F401
