# src/shrub/core/codec/mapping.py
"""
Mapeamento canônico entre estruturas genéricas (dict/list/escalares) e o
Schema Model.

Este módulo é a camada independente de formato do Codec: YAML e JSON
apenas convertem texto ↔ estruturas genéricas e delegam para
`project_from_dict` / `project_to_dict`.

Política de decodificação:
    - O root deve ser um mapping
    - Campos ausentes (ou null) recebem o default documentado
    - Campos tri-state ausentes viram None; vazios presentes são preservados
    - Nenhuma coerção: tipo divergente → SchemaMismatch com caminho do campo
    - Timeouts, batchtime e max_hosts são inteiros não negativos
    - Um comando declara `func` ou `command`, nunca ambos
    - Chaves de topo desconhecidas vão para `Project.extras`
    - Chaves desconhecidas em entidades aninhadas são ignoradas

Política de codificação:
    - Ordem de chaves = ordem de declaração dos campos do modelo
    - Campos None são omitidos
    - Coleções obrigatórias (tasks, buildvariants, commands, variant.tasks)
      são sempre emitidas, mesmo vazias
    - `functions` vazio e `priority == 0` são omitidos (ausente ≡ vazio)
    - Forma inválida em memória → SerializationFailure com caminho do campo

Limites explícitos:
    - Não lê nem escreve texto
    - Não valida referências entre entidades
    - Não mescla escopos (expansões, vars, params)
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Callable, Dict, List

from ..model import (
    BuildVariant,
    BuiltInCommand,
    Command,
    CommandType,
    DisplayTask,
    Distro,
    FunctionCall,
    Module,
    Parameter,
    Project,
    Task,
    TaskDependency,
    TaskGroup,
    TaskRef,
)
from ..model.values import find_unsupported, join_path, param_kind
from .errors import SchemaMismatch, SerializationFailure


PROJECT_KEYS = (
    "buildvariants",
    "tasks",
    "functions",
    "task_groups",
    "pre",
    "post",
    "timeout",
    "modules",
    "distros",
    "stepback",
    "pre_error_fails_task",
    "oom_tracker",
    "command_type",
    "ignore",
    "parameters",
)

Decoder = Callable[[Any, str], Any]


def _kind_name(value: Any) -> str:
    try:
        return param_kind(value).value
    except TypeError:
        return type(value).__name__


def _mismatch(expected: str, value: Any, path: str) -> SchemaMismatch:
    return SchemaMismatch(f"expected {expected}, found {_kind_name(value)}", path=path)


# -----------------------------
# Decoders: escalares
# -----------------------------

def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise _mismatch("string", value, path)
    return value


def _as_int(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch("integer", value, path)
    return value


def _as_count(value: Any, path: str) -> int:
    _as_int(value, path)
    if value < 0:
        raise SchemaMismatch(f"expected non-negative integer, found {value}", path=path)
    return value


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise _mismatch("boolean", value, path)
    return value


def _as_timeout(value: Any, path: str) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch("integer or expansion string", value, path)
    return _as_count(value, path)


def _as_command_type(value: Any, path: str) -> CommandType:
    _as_str(value, path)
    try:
        return CommandType(value)
    except ValueError:
        allowed = ", ".join(t.value for t in CommandType)
        raise SchemaMismatch(f"command type must be one of: {allowed}; found '{value}'", path=path) from None


def _as_mapping(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise _mismatch("mapping", value, path)
    return value


def _as_param_map(value: Any, path: str) -> Dict[str, Any]:
    _as_mapping(value, path)
    bad = find_unsupported(value, path)
    if bad is not None:
        raise SchemaMismatch("unsupported param value", path=bad)
    return dict(value)


def _as_str_map(value: Any, path: str) -> Dict[str, str]:
    _as_mapping(value, path)
    out: Dict[str, str] = {}
    for key, item in value.items():
        item_path = join_path(path, key)
        if not isinstance(key, str):
            raise _mismatch("string key", key, item_path)
        out[key] = _as_str(item, item_path)
    return out


def _list_of(decode: Decoder) -> Decoder:
    def _decode(value: Any, path: str) -> List[Any]:
        if not isinstance(value, list):
            raise _mismatch("sequence", value, path)
        return [decode(item, join_path(path, i)) for i, item in enumerate(value)]

    return _decode


def _field(
    data: Dict[str, Any],
    key: str,
    path: str,
    decode: Decoder,
    *,
    required: bool = False,
    default: Any = None,
) -> Any:
    field_path = join_path(path, key)
    value = data.get(key)
    if value is None:
        if required:
            raise SchemaMismatch(f"missing required field '{key}'", path=field_path)
        return default() if callable(default) else default
    return decode(value, field_path)


# -----------------------------
# Decoders: entidades
# -----------------------------

def _decode_command(value: Any, path: str) -> Command:
    data = _as_mapping(value, path)

    if "func" in data and "command" in data:
        raise SchemaMismatch("command must declare only one of 'func' or 'command'", path=path)

    if "func" in data:
        return FunctionCall(
            func=_field(data, "func", path, _as_str, required=True),
            vars=_field(data, "vars", path, _as_param_map),
            timeout_secs=_field(data, "timeout_secs", path, _as_count),
        )

    if "command" in data:
        return BuiltInCommand(
            command=_field(data, "command", path, _as_str, required=True),
            params=_field(data, "params", path, _as_param_map),
            command_type=_field(data, "type", path, _as_command_type),
            display_name=_field(data, "display_name", path, _as_str),
            timeout_secs=_field(data, "timeout_secs", path, _as_count),
            params_yaml=_field(data, "params_yaml", path, _as_str),
        )

    raise SchemaMismatch("command must declare 'func' or 'command'", path=path)


_commands = _list_of(_decode_command)
_str_list = _list_of(_as_str)


def _decode_dependency(value: Any, path: str) -> TaskDependency:
    data = _as_mapping(value, path)
    return TaskDependency(
        name=_field(data, "name", path, _as_str, required=True),
        variant=_field(data, "variant", path, _as_str),
    )


def _decode_task(value: Any, path: str) -> Task:
    data = _as_mapping(value, path)
    return Task(
        name=_field(data, "name", path, _as_str, required=True),
        commands=_field(data, "commands", path, _commands, default=list),
        depends_on=_field(data, "depends_on", path, _list_of(_decode_dependency)),
        exec_timeout_secs=_field(data, "exec_timeout_secs", path, _as_count),
        tags=_field(data, "tags", path, _str_list),
        priority=_field(data, "priority", path, _as_int, default=0),
        patchable=_field(data, "patchable", path, _as_bool),
        stepback=_field(data, "stepback", path, _as_bool),
    )


def _decode_task_ref(value: Any, path: str) -> TaskRef:
    data = _as_mapping(value, path)
    return TaskRef(
        name=_field(data, "name", path, _as_str, required=True),
        distros=_field(data, "distros", path, _str_list),
    )


def _decode_display_task(value: Any, path: str) -> DisplayTask:
    data = _as_mapping(value, path)
    return DisplayTask(
        name=_field(data, "name", path, _as_str, required=True),
        execution_tasks=_field(data, "execution_tasks", path, _str_list, default=list),
    )


def _decode_variant(value: Any, path: str) -> BuildVariant:
    data = _as_mapping(value, path)
    return BuildVariant(
        name=_field(data, "name", path, _as_str, required=True),
        tasks=_field(data, "tasks", path, _list_of(_decode_task_ref), default=list),
        display_name=_field(data, "display_name", path, _as_str),
        run_on=_field(data, "run_on", path, _str_list),
        display_tasks=_field(data, "display_tasks", path, _list_of(_decode_display_task)),
        batchtime=_field(data, "batchtime", path, _as_count),
        expansions=_field(data, "expansions", path, _as_str_map),
        stepback=_field(data, "stepback", path, _as_bool),
        modules=_field(data, "modules", path, _str_list),
    )


def _decode_task_group(value: Any, path: str) -> TaskGroup:
    data = _as_mapping(value, path)
    return TaskGroup(
        name=_field(data, "name", path, _as_str, required=True),
        tasks=_field(data, "tasks", path, _str_list, default=list),
        max_hosts=_field(data, "max_hosts", path, _as_count),
        share_processes=_field(data, "share_processes", path, _as_bool),
        setup_group_can_fail_task=_field(data, "setup_group_can_fail_task", path, _as_bool),
        setup_group_timeout_secs=_field(data, "setup_group_timeout_secs", path, _as_timeout),
        setup_group=_field(data, "setup_group", path, _commands),
        teardown_group=_field(data, "teardown_group", path, _commands),
        setup_task=_field(data, "setup_task", path, _commands),
        teardown_task=_field(data, "teardown_task", path, _commands),
        timeout=_field(data, "timeout", path, _commands),
    )


def _decode_module(value: Any, path: str) -> Module:
    data = _as_mapping(value, path)
    return Module(
        name=_field(data, "name", path, _as_str, required=True),
        repo=_field(data, "repo", path, _as_str, required=True),
        branch=_field(data, "branch", path, _as_str, required=True),
        prefix=_field(data, "prefix", path, _as_str, required=True),
    )


def _decode_distro(value: Any, path: str) -> Distro:
    data = _as_mapping(value, path)
    return Distro(
        name=_field(data, "name", path, _as_str, required=True),
        arch=_field(data, "arch", path, _as_str),
        platform=_field(data, "platform", path, _as_str),
    )


def _decode_parameter(value: Any, path: str) -> Parameter:
    data = _as_mapping(value, path)
    return Parameter(
        key=_field(data, "key", path, _as_str, required=True),
        value=_field(data, "value", path, _as_str),
        description=_field(data, "description", path, _as_str, default=""),
    )


def _decode_functions(value: Any, path: str) -> Dict[str, List[Command]]:
    data = _as_mapping(value, path)
    out: Dict[str, List[Command]] = {}
    for name, body in data.items():
        body_path = join_path(path, name)
        if not isinstance(name, str):
            raise _mismatch("string function name", name, body_path)
        out[name] = [] if body is None else _commands(body, body_path)
    return out


def project_from_dict(data: Any) -> Project:
    """
    Materializa um Project a partir de uma estrutura genérica.

    Raises:
        SchemaMismatch: Se algum campo não tiver a forma declarada.
    """
    if data is None:
        data = {}
    _as_mapping(data, "")

    extras = {k: deepcopy(v) for k, v in data.items() if k not in PROJECT_KEYS}

    return Project(
        buildvariants=_field(data, "buildvariants", "", _list_of(_decode_variant), default=list),
        tasks=_field(data, "tasks", "", _list_of(_decode_task), default=list),
        functions=_field(data, "functions", "", _decode_functions, default=dict),
        task_groups=_field(data, "task_groups", "", _list_of(_decode_task_group)),
        pre=_field(data, "pre", "", _commands),
        post=_field(data, "post", "", _commands),
        timeout=_field(data, "timeout", "", _commands),
        modules=_field(data, "modules", "", _list_of(_decode_module)),
        distros=_field(data, "distros", "", _list_of(_decode_distro)),
        stepback=_field(data, "stepback", "", _as_bool),
        pre_error_fails_task=_field(data, "pre_error_fails_task", "", _as_bool),
        oom_tracker=_field(data, "oom_tracker", "", _as_bool),
        command_type=_field(data, "command_type", "", _as_command_type),
        ignore=_field(data, "ignore", "", _str_list),
        parameters=_field(data, "parameters", "", _list_of(_decode_parameter)),
        extras=extras,
    )


# -----------------------------
# Encoders
# -----------------------------

def _fail(expected: str, value: Any, path: str) -> SerializationFailure:
    return SerializationFailure(f"expected {expected}, found {type(value).__name__}", path=path)


def _enc_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise _fail("str", value, path)
    return value


def _enc_int(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _fail("int", value, path)
    return value


def _enc_count(value: Any, path: str) -> int:
    _enc_int(value, path)
    if value < 0:
        raise SerializationFailure(f"expected non-negative int, found {value}", path=path)
    return value


def _enc_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise _fail("bool", value, path)
    return value


def _enc_timeout(value: Any, path: str) -> Any:
    if isinstance(value, str):
        return value
    return _enc_count(value, path)


def _enc_command_type(value: Any, path: str) -> str:
    if not isinstance(value, CommandType):
        raise _fail("CommandType", value, path)
    return value.value


def _enc_param_map(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise _fail("dict", value, path)
    bad = find_unsupported(value, path)
    if bad is not None:
        raise SerializationFailure("unsupported param value", path=bad)
    return deepcopy(value)


def _enc_str_map(value: Any, path: str) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise _fail("dict", value, path)
    out: Dict[str, str] = {}
    for key, item in value.items():
        item_path = join_path(path, key)
        out[_enc_str(key, item_path)] = _enc_str(item, item_path)
    return out


def _enc_list(encode: Decoder) -> Decoder:
    def _encode(value: Any, path: str) -> List[Any]:
        if not isinstance(value, list):
            raise _fail("list", value, path)
        return [encode(item, join_path(path, i)) for i, item in enumerate(value)]

    return _encode


def _put(out: Dict[str, Any], key: str, value: Any, path: str, encode: Decoder) -> None:
    if value is None:
        return
    out[key] = encode(value, join_path(path, key))


def _enc_command(value: Any, path: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if isinstance(value, FunctionCall):
        _put(out, "func", value.func, path, _enc_str)
        _put(out, "vars", value.vars, path, _enc_param_map)
        _put(out, "timeout_secs", value.timeout_secs, path, _enc_count)
        return out
    if isinstance(value, BuiltInCommand):
        _put(out, "command", value.command, path, _enc_str)
        _put(out, "params", value.params, path, _enc_param_map)
        _put(out, "type", value.command_type, path, _enc_command_type)
        _put(out, "display_name", value.display_name, path, _enc_str)
        _put(out, "timeout_secs", value.timeout_secs, path, _enc_count)
        _put(out, "params_yaml", value.params_yaml, path, _enc_str)
        return out
    raise _fail("FunctionCall or BuiltInCommand", value, path)


_enc_commands = _enc_list(_enc_command)
_enc_str_list = _enc_list(_enc_str)


def _entity(cls: type, value: Any, path: str) -> None:
    if not isinstance(value, cls):
        raise _fail(cls.__name__, value, path)


def _enc_dependency(value: Any, path: str) -> Dict[str, Any]:
    _entity(TaskDependency, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "variant", value.variant, path, _enc_str)
    return out


def _enc_task(value: Any, path: str) -> Dict[str, Any]:
    _entity(Task, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "commands", value.commands, path, _enc_commands)
    _put(out, "depends_on", value.depends_on, path, _enc_list(_enc_dependency))
    _put(out, "exec_timeout_secs", value.exec_timeout_secs, path, _enc_count)
    _put(out, "tags", value.tags, path, _enc_str_list)
    if value.priority != 0:
        _put(out, "priority", value.priority, path, _enc_int)
    _put(out, "patchable", value.patchable, path, _enc_bool)
    _put(out, "stepback", value.stepback, path, _enc_bool)
    return out


def _enc_task_ref(value: Any, path: str) -> Dict[str, Any]:
    _entity(TaskRef, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "distros", value.distros, path, _enc_str_list)
    return out


def _enc_display_task(value: Any, path: str) -> Dict[str, Any]:
    _entity(DisplayTask, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "execution_tasks", value.execution_tasks, path, _enc_str_list)
    return out


def _enc_variant(value: Any, path: str) -> Dict[str, Any]:
    _entity(BuildVariant, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "tasks", value.tasks, path, _enc_list(_enc_task_ref))
    _put(out, "display_name", value.display_name, path, _enc_str)
    _put(out, "run_on", value.run_on, path, _enc_str_list)
    _put(out, "display_tasks", value.display_tasks, path, _enc_list(_enc_display_task))
    _put(out, "batchtime", value.batchtime, path, _enc_count)
    _put(out, "expansions", value.expansions, path, _enc_str_map)
    _put(out, "stepback", value.stepback, path, _enc_bool)
    _put(out, "modules", value.modules, path, _enc_str_list)
    return out


def _enc_task_group(value: Any, path: str) -> Dict[str, Any]:
    _entity(TaskGroup, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "tasks", value.tasks, path, _enc_str_list)
    _put(out, "max_hosts", value.max_hosts, path, _enc_count)
    _put(out, "share_processes", value.share_processes, path, _enc_bool)
    _put(out, "setup_group_can_fail_task", value.setup_group_can_fail_task, path, _enc_bool)
    _put(out, "setup_group_timeout_secs", value.setup_group_timeout_secs, path, _enc_timeout)
    _put(out, "setup_group", value.setup_group, path, _enc_commands)
    _put(out, "teardown_group", value.teardown_group, path, _enc_commands)
    _put(out, "setup_task", value.setup_task, path, _enc_commands)
    _put(out, "teardown_task", value.teardown_task, path, _enc_commands)
    _put(out, "timeout", value.timeout, path, _enc_commands)
    return out


def _enc_module(value: Any, path: str) -> Dict[str, Any]:
    _entity(Module, value, path)
    out: Dict[str, Any] = {}
    for key in ("name", "repo", "branch", "prefix"):
        _put(out, key, getattr(value, key), path, _enc_str)
    return out


def _enc_distro(value: Any, path: str) -> Dict[str, Any]:
    _entity(Distro, value, path)
    out: Dict[str, Any] = {}
    _put(out, "name", value.name, path, _enc_str)
    _put(out, "arch", value.arch, path, _enc_str)
    _put(out, "platform", value.platform, path, _enc_str)
    return out


def _enc_parameter(value: Any, path: str) -> Dict[str, Any]:
    _entity(Parameter, value, path)
    out: Dict[str, Any] = {}
    _put(out, "key", value.key, path, _enc_str)
    _put(out, "value", value.value, path, _enc_str)
    _put(out, "description", value.description, path, _enc_str)
    return out


def _enc_functions(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise _fail("dict", value, path)
    out: Dict[str, Any] = {}
    for name, body in value.items():
        body_path = join_path(path, name)
        out[_enc_str(name, body_path)] = _enc_commands(body, body_path)
    return out


def project_to_dict(project: Project, *, include_extras: bool = True) -> Dict[str, Any]:
    """
    Converte um Project para estrutura genérica pronta para YAML/JSON.

    Args:
        project: Project a converter.
        include_extras: Se True, reemite as chaves de topo desconhecidas
            preservadas em `project.extras` (após as chaves conhecidas).

    Raises:
        SerializationFailure: Se algum valor não tiver forma representável.
    """
    _entity(Project, project, "")
    out: Dict[str, Any] = {}
    _put(out, "buildvariants", project.buildvariants, "", _enc_list(_enc_variant))
    _put(out, "tasks", project.tasks, "", _enc_list(_enc_task))
    if project.functions:
        _put(out, "functions", project.functions, "", _enc_functions)
    _put(out, "task_groups", project.task_groups, "", _enc_list(_enc_task_group))
    _put(out, "pre", project.pre, "", _enc_commands)
    _put(out, "post", project.post, "", _enc_commands)
    _put(out, "timeout", project.timeout, "", _enc_commands)
    _put(out, "modules", project.modules, "", _enc_list(_enc_module))
    _put(out, "distros", project.distros, "", _enc_list(_enc_distro))
    _put(out, "stepback", project.stepback, "", _enc_bool)
    _put(out, "pre_error_fails_task", project.pre_error_fails_task, "", _enc_bool)
    _put(out, "oom_tracker", project.oom_tracker, "", _enc_bool)
    _put(out, "command_type", project.command_type, "", _enc_command_type)
    _put(out, "ignore", project.ignore, "", _enc_str_list)
    _put(out, "parameters", project.parameters, "", _enc_list(_enc_parameter))

    if include_extras:
        for key, value in project.extras.items():
            if key in PROJECT_KEYS:
                raise SerializationFailure(
                    f"extra key '{key}' shadows a recognized field", path=join_path("", key)
                )
            out[key] = deepcopy(value)

    return out
