# src/shrub/core/model/task_group.py
"""Task groups: Tasks relacionadas que compartilham hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .commands import Command


# Segundos (int) ou uma expansão (ex.: "${setup_timeout}").
TimeoutValue = Union[int, str]


@dataclass
class TaskGroup:
    name: str = ""
    # ordem de execução das Tasks no grupo
    tasks: List[str] = field(default_factory=list)

    max_hosts: Optional[int] = None
    share_processes: Optional[bool] = None
    setup_group_can_fail_task: Optional[bool] = None
    setup_group_timeout_secs: Optional[TimeoutValue] = None

    setup_group: Optional[List[Command]] = None
    teardown_group: Optional[List[Command]] = None
    setup_task: Optional[List[Command]] = None
    teardown_task: Optional[List[Command]] = None
    timeout: Optional[List[Command]] = None
