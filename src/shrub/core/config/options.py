# src/shrub/core/config/options.py
"""
Opções de formatação e tolerância do Codec.

As opções não alteram o modelo produzido por `parse`; afetam apenas o
texto emitido por `serialize` / `serialize_json` e a reemissão de chaves
de topo desconhecidas.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .errors import InvalidCodecOptionError


@dataclass(frozen=True)
class CodecOptions:
    """
    Opções do Codec.

    Campos:
        - yaml_indent: indentação de blocos YAML
        - yaml_width: largura antes de quebrar escalares longos
        - explicit_start: emite o marcador `---` no início do documento
        - json_indent: indentação do JSON de intercâmbio
        - ensure_ascii: escapa caracteres não ASCII (YAML e JSON)
        - preserve_unknown_keys: reemite `Project.extras` na serialização
    """

    yaml_indent: int = 2
    yaml_width: int = 4096
    explicit_start: bool = False
    json_indent: int = 2
    ensure_ascii: bool = False
    preserve_unknown_keys: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodecOptions":
        """
        Materializa opções a partir de um dicionário.

        Chaves ausentes recebem o default; chaves desconhecidas e tipos
        divergentes são rejeitados (sem coerção).

        Raises:
            InvalidCodecOptionError: Se houver chave desconhecida ou tipo inválido.
        """
        if not isinstance(data, dict):
            raise InvalidCodecOptionError(f"codec options must be a mapping, got: {type(data).__name__}")

        declared = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(declared))
        if unknown:
            raise InvalidCodecOptionError(f"unknown codec options: {unknown}")

        for name, value in data.items():
            expected = type(getattr(cls, name))
            if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
                raise InvalidCodecOptionError(
                    f"codec option '{name}' must be {expected.__name__}, got: {type(value).__name__}"
                )
            if expected is int and value < 0:
                raise InvalidCodecOptionError(f"codec option '{name}' must be >= 0")

        return cls(**data)


DEFAULT_OPTIONS = CodecOptions()
