# src/shrub/core/model/commands.py
"""
Commands: blocos básicos de execução de Tasks e Functions.

Um comando é um de dois tipos:
    - FunctionCall   → invocação, por nome, de uma Function do projeto
    - BuiltInCommand → ação nativa do CI (ex.: `shell.exec`, `s3.put`)

O comando nativo carrega um discriminador (`command`) e um mapa livre de
parâmetros. O vocabulário de comandos é versionado pelo sistema externo,
não por este modelo; os builders abaixo cobrem apenas os comandos mais
usados e produzem valores comuns de `BuiltInCommand`.

Limites explícitos:
    - Não executa comandos
    - Não valida se a Function referenciada existe
    - Não valida parâmetros obrigatórios de cada comando nativo
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .values import ParamMap


SHELL_EXEC = "shell.exec"


class CommandType(str, Enum):
    """Como a falha de um comando deve ser reportada."""

    TEST = "test"
    SYSTEM = "system"
    SETUP = "setup"


@dataclass
class FunctionCall:
    """Invocação de uma Function declarada em `Project.functions`."""

    func: str = ""
    vars: Optional[ParamMap] = None
    timeout_secs: Optional[int] = None


@dataclass
class BuiltInCommand:
    """
    Comando nativo do CI.

    Campos:
        - command: discriminador do comando (ex.: "shell.exec")
        - params: parâmetros abertos do comando
        - command_type: tipo de falha (chave `type` no documento)
        - display_name: nome exibido na UI do CI
        - timeout_secs: timeout específico do comando
        - params_yaml: parâmetros serializados em YAML (forma alternativa)
    """

    command: str = ""
    params: Optional[ParamMap] = None
    command_type: Optional[CommandType] = None
    display_name: Optional[str] = None
    timeout_secs: Optional[int] = None
    params_yaml: Optional[str] = None

    @property
    def is_shell_exec(self) -> bool:
        return self.command == SHELL_EXEC


Command = Union[FunctionCall, BuiltInCommand]


def _drop_none(params: Dict[str, Any]) -> ParamMap:
    return {k: v for k, v in params.items() if v is not None}


def _builtin(command: str, params: Dict[str, Any], command_type: Optional[CommandType] = None) -> BuiltInCommand:
    return BuiltInCommand(command=command, params=_drop_none(params), command_type=command_type)


# -----------------------------
# Builders
# -----------------------------

def function_call(
    name: str,
    vars: Optional[ParamMap] = None,
    timeout_secs: Optional[int] = None,
) -> FunctionCall:
    return FunctionCall(func=name, vars=vars, timeout_secs=timeout_secs)


def shell_exec(
    script: str,
    *,
    command_type: Optional[CommandType] = None,
    **params: Any,
) -> BuiltInCommand:
    """Executa o script informado (`shell.exec`).

    Parâmetros adicionais comuns: working_dir, env, shell, silent,
    continue_on_err, add_expansions_to_env, include_expansions_in_env.
    """
    return _builtin(SHELL_EXEC, {"script": script, **params}, command_type)


def subprocess_exec(
    binary: Optional[str] = None,
    args: Optional[List[str]] = None,
    *,
    command_type: Optional[CommandType] = None,
    **params: Any,
) -> BuiltInCommand:
    return _builtin("subprocess.exec", {"binary": binary, "args": args, **params}, command_type)


def git_get_project(directory: str, **params: Any) -> BuiltInCommand:
    return _builtin("git.get_project", {"directory": directory, **params})


def archive_targz_pack(target: str, source_dir: str, include: List[str], **params: Any) -> BuiltInCommand:
    return _builtin(
        "archive.targz_pack",
        {"target": target, "source_dir": source_dir, "include": include, **params},
    )


def archive_targz_extract(path: str, destination: str, **params: Any) -> BuiltInCommand:
    return _builtin("archive.targz_extract", {"path": path, "destination": destination, **params})


def attach_results(file_location: str) -> BuiltInCommand:
    return _builtin("attach.results", {"file_location": file_location})


def attach_artifacts(files: List[str], **params: Any) -> BuiltInCommand:
    return _builtin("attach.artifacts", {"files": files, **params})


def expansions_update(
    updates: Optional[Dict[str, str]] = None,
    file: Optional[str] = None,
    **params: Any,
) -> BuiltInCommand:
    """Atualiza expansões em runtime (`expansions.update`).

    `updates` é convertido para a lista de pares `{key, value}` usada no
    documento, preservando a ordem de inserção.
    """
    kv = None
    if updates is not None:
        kv = [{"key": k, "value": v} for k, v in updates.items()]
    return _builtin("expansions.update", {"updates": kv, "file": file, **params})


def expansions_write(file: str, **params: Any) -> BuiltInCommand:
    return _builtin("expansions.write", {"file": file, **params})


def generate_tasks(files: List[str]) -> BuiltInCommand:
    return _builtin("generate.tasks", {"files": files})


def timeout_update(
    exec_timeout_secs: Union[int, str, None] = None,
    timeout_secs: Union[int, str, None] = None,
) -> BuiltInCommand:
    return _builtin(
        "timeout.update",
        {"exec_timeout_secs": exec_timeout_secs, "timeout_secs": timeout_secs},
    )


def s3_put(
    local_file: str,
    remote_file: str,
    bucket: str,
    *,
    aws_key: str,
    aws_secret: str,
    permissions: str = "public-read",
    content_type: str = "application/octet-stream",
    **params: Any,
) -> BuiltInCommand:
    return _builtin(
        "s3.put",
        {
            "local_file": local_file,
            "remote_file": remote_file,
            "bucket": bucket,
            "aws_key": aws_key,
            "aws_secret": aws_secret,
            "permissions": permissions,
            "content_type": content_type,
            **params,
        },
    )


def s3_get(
    remote_file: str,
    bucket: str,
    *,
    aws_key: str,
    aws_secret: str,
    local_file: Optional[str] = None,
    extract_to: Optional[str] = None,
    **params: Any,
) -> BuiltInCommand:
    return _builtin(
        "s3.get",
        {
            "remote_file": remote_file,
            "bucket": bucket,
            "aws_key": aws_key,
            "aws_secret": aws_secret,
            "local_file": local_file,
            "extract_to": extract_to,
            **params,
        },
    )
