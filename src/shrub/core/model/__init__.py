# src/shrub/core/model/__init__.py
"""
Schema Model: forma tipada e canônica do documento de configuração.

Este pacote contém apenas dados: dataclasses com defaults explícitos,
igualdade estrutural e builders de comandos. Nenhuma lógica de parsing
ou serialização vive aqui.

Componentes:
    - values     → valores dinâmicos (ParamValue, ParamKind)
    - commands   → FunctionCall, BuiltInCommand, CommandType e builders
    - task       → Task, TaskDependency, TaskRef
    - task_group → TaskGroup, TimeoutValue
    - variant    → BuildVariant, DisplayTask
    - distro     → Distro
    - project    → Project, Module, Parameter, Function
"""

from .commands import (  # noqa: F401
    SHELL_EXEC,
    BuiltInCommand,
    Command,
    CommandType,
    FunctionCall,
    archive_targz_extract,
    archive_targz_pack,
    attach_artifacts,
    attach_results,
    expansions_update,
    expansions_write,
    function_call,
    generate_tasks,
    git_get_project,
    s3_get,
    s3_put,
    shell_exec,
    subprocess_exec,
    timeout_update,
)
from .distro import Distro  # noqa: F401
from .project import Function, Module, Parameter, Project  # noqa: F401
from .task import Task, TaskDependency, TaskRef  # noqa: F401
from .task_group import TaskGroup, TimeoutValue  # noqa: F401
from .values import ParamKind, ParamMap, ParamValue, find_unsupported, param_kind  # noqa: F401
from .variant import BuildVariant, DisplayTask  # noqa: F401
