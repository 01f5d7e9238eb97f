# src/shrub/core/model/project.py
"""
Project: raiz do documento de configuração do CI.

O Project contém, por valor, todas as Tasks, build variants, Functions,
task groups, módulos e hooks globais (pre/post/timeout).

Decisões arquiteturais:
    - A ordem dos campos é a ordem de emissão no documento serializado
    - Functions são um mapa nome → lista de comandos em ordem de inserção
    - Chaves de topo desconhecidas ficam em `extras`, fora da igualdade
      estrutural (um documento com chaves extras equivale ao mesmo
      documento sem elas)

Invariantes (documentados, não verificados aqui):
    - Nomes de Tasks, Functions e build variants são únicos no Project
    - Referências por nome apontam para entidades existentes

Limites explícitos:
    - Não resolve grafos de dependência
    - Não valida regras do CI
    - Não faz parsing nem serialização (ver `shrub.core.codec`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .commands import Command, CommandType
from .distro import Distro
from .task import Task
from .task_group import TaskGroup
from .variant import BuildVariant


Function = List[Command]


@dataclass
class Module:
    """Repositório adicional incluído nas Tasks."""

    name: str = ""
    repo: str = ""
    branch: str = ""
    prefix: str = ""


@dataclass
class Parameter:
    """Parâmetro customizável em patch builds."""

    key: str = ""
    value: Optional[str] = None
    description: str = ""


@dataclass
class Project:
    buildvariants: List[BuildVariant] = field(default_factory=list)
    tasks: List[Task] = field(default_factory=list)
    functions: Dict[str, Function] = field(default_factory=dict)
    task_groups: Optional[List[TaskGroup]] = None

    # hooks globais
    pre: Optional[List[Command]] = None
    post: Optional[List[Command]] = None
    timeout: Optional[List[Command]] = None

    modules: Optional[List[Module]] = None
    distros: Optional[List[Distro]] = None

    stepback: Optional[bool] = None
    pre_error_fails_task: Optional[bool] = None
    oom_tracker: Optional[bool] = None
    command_type: Optional[CommandType] = None
    ignore: Optional[List[str]] = None
    parameters: Optional[List[Parameter]] = None

    extras: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def get_task(self, name: str) -> Optional[Task]:
        for task in self.tasks:
            if task.name == name:
                return task
        return None

    def get_variant(self, name: str) -> Optional[BuildVariant]:
        for variant in self.buildvariants:
            if variant.name == name:
                return variant
        return None

    def get_function(self, name: str) -> Optional[Function]:
        return self.functions.get(name)
