# src/shrub/core/model/values.py
"""
Valores dinâmicos do modelo (parâmetros de comandos, vars e expansões).

O vocabulário de comandos do CI evolui de forma independente deste modelo.
Por isso, parâmetros abertos são representados como valores dinâmicos
restritos a um conjunto fechado de variantes:

    - string
    - number (int/float; bool não conta como número)
    - boolean
    - sequence (lista de valores dinâmicos)
    - mapping (chaves string → valores dinâmicos)
    - null

Decisões arquiteturais:
    - Valores são tipos nativos do Python (str, int, float, bool, list, dict, None)
    - A tag explícita da variante é obtida via `param_kind`
    - Qualquer outro tipo Python é rejeitado explicitamente

Limites explícitos:
    - Não converte tipos (ex.: "1" nunca vira 1)
    - Não interpreta expansões `${...}`
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union


ParamValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
ParamMap = Dict[str, ParamValue]


class ParamKind(str, Enum):
    """Tag canônica da variante de um `ParamValue`."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NULL = "null"


def param_kind(value: Any) -> ParamKind:
    """
    Retorna a variante de um valor dinâmico.

    `bool` é checado antes de número (`bool` é subclasse de `int`).
    Apenas o nível superior é inspecionado; use `find_unsupported` para
    validar estruturas aninhadas.

    Raises:
        TypeError: Se o tipo Python não corresponder a nenhuma variante.
    """
    if value is None:
        return ParamKind.NULL
    if isinstance(value, bool):
        return ParamKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ParamKind.NUMBER
    if isinstance(value, str):
        return ParamKind.STRING
    if isinstance(value, list):
        return ParamKind.SEQUENCE
    if isinstance(value, dict):
        return ParamKind.MAPPING
    raise TypeError(f"unsupported param value type: {type(value).__name__}")


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: str, token: Any) -> str:
    """Concatena um token a um JSON pointer (RFC 6901)."""
    return f"{base}/{_jp_escape(str(token))}"


def find_unsupported(value: Any, path: str = "") -> Union[str, None]:
    """
    Procura recursivamente o primeiro valor não representável.

    Returns:
        O caminho (JSON pointer) do primeiro valor inválido, ou None se
        toda a estrutura for um `ParamValue` válido.
    """
    try:
        kind = param_kind(value)
    except TypeError:
        return path or "/"

    if kind is ParamKind.SEQUENCE:
        for i, item in enumerate(value):
            bad = find_unsupported(item, join_path(path, i))
            if bad is not None:
                return bad
    elif kind is ParamKind.MAPPING:
        for key, item in value.items():
            if not isinstance(key, str):
                return join_path(path, key)
            bad = find_unsupported(item, join_path(path, key))
            if bad is not None:
                return bad
    return None
