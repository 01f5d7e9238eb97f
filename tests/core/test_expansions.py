# tests/core/test_expansions.py
"""
Testes da precedência entre escopos de variáveis.

Os testes asseguram que:
- as vars da chamada de Function sobrescrevem as expansões do build variant
- mappings aninhados são mesclados e listas substituídas
- a expansão de Tasks inlina os corpos das Functions na ordem declarada
- o modelo nunca é mutado

Limites explícitos:
    - Não valida interpolação de `${...}` (fora do escopo do shrub)
"""

import copy

import pytest

from shrub.core.expansions import (
    ExpandedCommand,
    NestedFunctionCallError,
    UnknownFunctionError,
    UnknownTaskError,
    effective_vars,
    expand_task_commands,
)
from shrub.core.model import BuildVariant, FunctionCall, Project, Task, shell_exec


@pytest.fixture
def project() -> Project:
    return Project(
        buildvariants=[BuildVariant(name="ubuntu", expansions={"python": "3.11", "mode": "release"})],
        tasks=[
            Task(
                name="compile",
                commands=[
                    shell_exec("echo start"),
                    FunctionCall(func="build", vars={"mode": "debug", "flags": ["-g"]}),
                    FunctionCall(func="upload"),
                ],
            ),
            Task(name="broken", commands=[FunctionCall(func="missing")]),
            Task(name="nested", commands=[FunctionCall(func="wrapper")]),
        ],
        functions={
            "build": [shell_exec("make ${mode}"), shell_exec("make check")],
            "upload": [shell_exec("upload.sh")],
            "wrapper": [FunctionCall(func="build")],
        },
    )


def test_call_vars_override_variant_expansions(project):
    variant = project.get_variant("ubuntu")
    call = project.get_task("compile").commands[1]
    assert effective_vars(variant, call) == {"python": "3.11", "mode": "debug", "flags": ["-g"]}


def test_effective_vars_with_missing_scopes(project):
    assert effective_vars(None) == {}
    assert effective_vars(project.get_variant("ubuntu")) == {"python": "3.11", "mode": "release"}
    assert effective_vars(None, FunctionCall(func="f", vars={"a": 1})) == {"a": 1}


def test_nested_mappings_merge_and_lists_replace():
    variant = BuildVariant(name="v", expansions={"opts": "x"})
    call = FunctionCall(func="f", vars={"opts": {"level": 2}, "env": {"A": "1"}})
    out = effective_vars(variant, call)
    assert out == {"opts": {"level": 2}, "env": {"A": "1"}}


def test_effective_vars_does_not_mutate_model(project):
    before = copy.deepcopy(project)
    out = effective_vars(project.get_variant("ubuntu"), project.get_task("compile").commands[1])
    out["flags"].append("-O0")
    out["python"] = "2.7"
    assert project == before


def test_expand_task_commands_inlines_functions(project):
    """
    Verifica a expansão de uma Task com comandos nativos e chamadas.

    Invariantes:
        - Comandos nativos da Task mantêm `origin=None`
        - Cada comando de uma Function carrega o nome de origem e as vars da chamada
        - A ordem final é a ordem de declaração
    """
    expanded = expand_task_commands(project, "compile")
    assert expanded == [
        ExpandedCommand(command=shell_exec("echo start")),
        ExpandedCommand(command=shell_exec("make ${mode}"), origin="build", vars={"mode": "debug", "flags": ["-g"]}),
        ExpandedCommand(command=shell_exec("make check"), origin="build", vars={"mode": "debug", "flags": ["-g"]}),
        ExpandedCommand(command=shell_exec("upload.sh"), origin="upload"),
    ]


def test_expand_does_not_share_model_objects(project):
    before = copy.deepcopy(project)
    expanded = expand_task_commands(project, "compile")
    expanded[1].command.params["script"] = "make clean"
    expanded[1].vars["mode"] = "changed"
    assert project == before


def test_unknown_task(project):
    with pytest.raises(UnknownTaskError):
        expand_task_commands(project, "deploy")


def test_unknown_function(project):
    with pytest.raises(UnknownFunctionError):
        expand_task_commands(project, "broken")


def test_nested_function_call_is_rejected(project):
    with pytest.raises(NestedFunctionCallError):
        expand_task_commands(project, "nested")
