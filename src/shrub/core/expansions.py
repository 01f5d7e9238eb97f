# src/shrub/core/expansions.py
"""
Precedência entre escopos de variáveis.

O Codec nunca mescla escopos: expansões do build variant, vars de
chamadas de Function e params de comandos são preservados exatamente
como declarados. Este módulo oferece, sob demanda, a visão resolvida
que um consumidor precisa.

Política de precedência (do menor para o maior):
    1. `BuildVariant.expansions`
    2. `FunctionCall.vars` (escopo da Task, no ponto de chamada)

Regras de merge (ver `shrub.core.config.merge`, modo não estrito):
    - mappings aninhados são mesclados recursivamente
    - listas são substituídas integralmente
    - escalares do escopo mais interno sempre vencem

Limites explícitos:
    - Não interpola `${...}` em params
    - Não muta o modelo
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import List, Optional

from .config.merge import deep_merge
from .model import BuildVariant, BuiltInCommand, FunctionCall, Project
from .model.values import ParamMap


class UnknownTaskError(KeyError):
    """Task referenciada não existe no Project."""


class UnknownFunctionError(KeyError):
    """Function referenciada por uma chamada não existe no Project."""


class NestedFunctionCallError(ValueError):
    """O corpo de uma Function contém outra chamada de Function."""


@dataclass
class ExpandedCommand:
    """Comando nativo após a expansão das chamadas de Function."""

    command: BuiltInCommand
    # nome da Function de origem; None para comandos declarados na própria Task
    origin: Optional[str] = None
    vars: Optional[ParamMap] = None


def effective_vars(variant: Optional[BuildVariant], call: Optional[FunctionCall] = None) -> ParamMap:
    """
    Resolve as variáveis visíveis em uma chamada de Function.

    As vars da chamada sobrescrevem as expansões do build variant.
    """
    base: ParamMap = dict(variant.expansions or {}) if variant is not None else {}
    override: ParamMap = dict(call.vars or {}) if call is not None else {}
    return deep_merge(base, override, strict=False)


def expand_task_commands(project: Project, task_name: str) -> List[ExpandedCommand]:
    """
    Expande os comandos de uma Task, substituindo chamadas de Function
    pelos comandos nativos do corpo da Function.

    Functions não são expandidas recursivamente: uma chamada dentro do
    corpo de uma Function é erro.

    Raises:
        UnknownTaskError: Se a Task não existir.
        UnknownFunctionError: Se alguma Function chamada não existir.
        NestedFunctionCallError: Se o corpo de uma Function chamar outra Function.
    """
    task = project.get_task(task_name)
    if task is None:
        raise UnknownTaskError(task_name)

    expanded: List[ExpandedCommand] = []
    for cmd in task.commands:
        if isinstance(cmd, BuiltInCommand):
            expanded.append(ExpandedCommand(command=deepcopy(cmd)))
            continue

        body = project.get_function(cmd.func)
        if body is None:
            raise UnknownFunctionError(cmd.func)

        for inner in body:
            if not isinstance(inner, BuiltInCommand):
                raise NestedFunctionCallError(f"nested function call in '{cmd.func}': {inner.func}")
            expanded.append(
                ExpandedCommand(
                    command=deepcopy(inner),
                    origin=cmd.func,
                    vars=deepcopy(cmd.vars),
                )
            )

    return expanded
