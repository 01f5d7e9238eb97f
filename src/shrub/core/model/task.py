# src/shrub/core/model/task.py
"""
Tasks: unidades nomeadas de trabalho.

Uma Task é uma sequência ordenada de comandos (nativos ou chamadas de
Function). Dependências são referências por nome a outras Tasks; a
existência da Task referenciada é responsabilidade do consumidor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .commands import Command


@dataclass
class TaskDependency:
    """Dependência de uma Task (opcionalmente restrita a um build variant)."""

    name: str = ""
    variant: Optional[str] = None


@dataclass
class TaskRef:
    """Referência a uma Task dentro de um build variant."""

    name: str = ""
    distros: Optional[List[str]] = None


@dataclass
class Task:
    """
    Definição de uma Task.

    Campos tri-state (None = ausente no documento): depends_on,
    exec_timeout_secs, tags, patchable, stepback.

    `priority` colapsa ausência e zero: 0 é o default e não é emitido.
    """

    name: str = ""
    commands: List[Command] = field(default_factory=list)
    depends_on: Optional[List[TaskDependency]] = None
    exec_timeout_secs: Optional[int] = None
    tags: Optional[List[str]] = None
    priority: int = 0
    patchable: Optional[bool] = None
    stepback: Optional[bool] = None

    def get_reference(self, distros: Optional[List[str]] = None) -> TaskRef:
        """Cria a referência desta Task para inclusão em um build variant."""
        return TaskRef(name=self.name, distros=distros)
