# src/shrub/core/model/variant.py
"""
Build variants: ambientes nomeados de execução.

Um build variant seleciona quais Tasks rodam e onde (distros em `run_on`
ou sobrescritas por referência em `TaskRef.distros`).

Expansões são um mapa string → string em ordem de inserção; a ordem é
preservada na serialização.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .task import TaskRef


@dataclass
class DisplayTask:
    """Agrupamento visual de Tasks de execução na UI do CI."""

    name: str = ""
    execution_tasks: List[str] = field(default_factory=list)


@dataclass
class BuildVariant:
    name: str = ""
    tasks: List[TaskRef] = field(default_factory=list)
    display_name: Optional[str] = None
    run_on: Optional[List[str]] = None
    display_tasks: Optional[List[DisplayTask]] = None
    batchtime: Optional[int] = None
    expansions: Optional[Dict[str, str]] = None
    stepback: Optional[bool] = None
    modules: Optional[List[str]] = None

    def task_names(self) -> List[str]:
        return [ref.name for ref in self.tasks]
