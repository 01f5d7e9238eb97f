# tests/conftest.py
"""
Fixtures compartilhados para testes do shrub.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de projeto mínimos e determinísticos (YAML)
- um Project construído apenas via construtores do modelo
- arquivos de opções do Codec (defaults)

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Dados retornados são determinísticos e isolados
    - Cada fixture retorna um objeto novo (sem estado compartilhado)

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos são criados nos próprios testes via tmp_path)
    - Todas as fixtures são seguras para execução em paralelo

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

import pytest

from shrub.core.model import (
    BuildVariant,
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
    archive_targz_pack,
    attach_results,
    function_call,
    git_get_project,
    s3_put,
    shell_exec,
)


@pytest.fixture
def compile_project_yaml() -> str:
    """Documento mínimo: Task `compile` com dois comandos e o variant `ubuntu`."""
    return """
tasks:
  - name: compile
    commands:
      - command: shell.exec
        params:
          script: make
      - command: shell.exec
        params:
          script: make test
buildvariants:
  - name: ubuntu
    display_name: Ubuntu 22.04
    run_on:
      - ubuntu2204-small
    tasks:
      - name: compile
""".lstrip()


@pytest.fixture
def full_project() -> Project:
    """
    Project construído exclusivamente por construtores e builders do modelo.

    Cobre todas as entidades (Functions, task groups, módulos, distros,
    parâmetros) e os casos tri-state relevantes:
        - `depends_on=[]` explícito
        - `tags=None` ausente
        - `expansions` com ordem de inserção não alfabética
    """
    setup = [
        git_get_project("src", revisions={"mongo-tools": "${tools_rev}"}),
        FunctionCall(func="fetch deps", vars={"retries": 3, "mirrors": ["a", "b"]}),
    ]
    return Project(
        buildvariants=[
            BuildVariant(
                name="ubuntu",
                display_name="Ubuntu 22.04",
                run_on=["ubuntu2204-small"],
                tasks=[Task(name="compile").get_reference(), Task(name="lint").get_reference(["rhel80"])],
                expansions={"zeta": "1", "alpha": "2"},
                display_tasks=[DisplayTask(name="checks", execution_tasks=["compile", "lint"])],
                batchtime=60,
            ),
        ],
        tasks=[
            Task(
                name="compile",
                commands=[
                    function_call("fetch deps", vars={"retries": 1}),
                    shell_exec("set -o errexit\nmake -j8\n", working_dir="src", command_type=CommandType.TEST),
                    archive_targz_pack("dist.tgz", "build", ["*.so"]),
                    s3_put("dist.tgz", "builds/${revision}.tgz", "ci-artifacts", aws_key="${key}", aws_secret="${secret}"),
                ],
                depends_on=[],
                exec_timeout_secs=3600,
                priority=5,
            ),
            Task(
                name="lint",
                commands=[shell_exec("make lint", env={"FLAKE": "1"}), attach_results("report.json")],
                depends_on=[TaskDependency(name="compile", variant="ubuntu")],
                tags=["quick"],
                patchable=False,
            ),
        ],
        functions={
            "fetch deps": [shell_exec("pip download -r requirements.txt", silent=True, ratio=0.5, extra=None)],
            "noop": [],
        },
        task_groups=[
            TaskGroup(
                name="tg",
                tasks=["compile", "lint"],
                max_hosts=2,
                setup_group_timeout_secs="${setup_timeout}",
                setup_group=setup,
            )
        ],
        pre=[shell_exec("echo pre")],
        modules=[Module(name="tools", repo="git@example.com:tools.git", branch="main", prefix="src/tools")],
        distros=[Distro(name="ubuntu2204-small", arch="x86_64")],
        stepback=True,
        command_type=CommandType.SYSTEM,
        ignore=["*.md"],
        parameters=[Parameter(key="build_flags", value="-O2", description="compiler flags")],
    )


@pytest.fixture
def codec_options_defaults_yaml() -> str:
    return """
yaml_indent: 2
yaml_width: 4096
explicit_start: false
json_indent: 2
ensure_ascii: false
preserve_unknown_keys: true
""".lstrip()
