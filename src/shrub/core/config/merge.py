# src/shrub/core/config/merge.py
"""
Deep-merge de mapeamentos.

Usado em dois pontos do shrub:
    - opções do Codec: arquivo de defaults sobrescrito pelo arquivo local
    - escopos de variáveis: expansões do build variant sobrescritas pelas
      vars da chamada de Function (`shrub.core.expansions`)

Política:
    - dict + dict → merge recursivo por chave
    - list        → o override substitui a lista inteira
    - escalar     → o override substitui o valor
    - tipos diferentes → ConfigTypeConflictError (apenas no modo estrito)

A ordem das chaves resultantes é a da base, seguida das chaves novas do
override. Nenhum argumento é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _resolve(key: str, current: Any, incoming: Any, strict: bool) -> Any:
    if isinstance(current, dict) and isinstance(incoming, dict):
        return deep_merge(current, incoming, strict=strict)

    if strict and not isinstance(incoming, list) and type(current) is not type(incoming):
        raise ConfigTypeConflictError(
            f"Type conflict at key '{key}': {type(current).__name__} vs {type(incoming).__name__}"
        )

    return deepcopy(incoming)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any], *, strict: bool = True) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` e retorna um novo dicionário.

    Args:
        base (Dict[str, Any]): Valores de menor precedência.
        override (Dict[str, Any]): Valores de maior precedência.
        strict (bool): Se False, trocas de tipo são aceitas e o override vence.

    Raises:
        ConfigTypeConflictError: Em conflito de tipo (modo estrito) ou se
            algum dos argumentos não for um dicionário.
    """
    for label, value in (("base", base), ("override", override)):
        if not isinstance(value, dict):
            raise ConfigTypeConflictError(f"Deep-merge {label} must be a dict, got: {type(value).__name__}")

    merged: Dict[str, Any] = deepcopy(base)
    for key, incoming in override.items():
        if key in merged:
            merged[key] = _resolve(key, merged[key], incoming, strict)
        else:
            merged[key] = deepcopy(incoming)
    return merged
