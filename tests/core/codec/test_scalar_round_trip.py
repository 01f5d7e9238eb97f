# tests/core/codec/test_scalar_round_trip.py
"""
Testes da lei de round-trip sobre conteúdo escalar variado.

Cada valor é colocado em vários pontos do modelo (nome de Task, script,
vars de chamada, expansões, params aninhados) e o Project precisa
sobreviver a serialize → parse em YAML e em JSON.

Os valores cobrem:
- strings multilinha com espaços, tabs e quebras no início/fim
- quebras Unicode (NEL, LS, PS) e CR
- strings ambíguas em YAML 1.1 ("yes", "1.0", "2020-01-01", "~", ...)
- indicadores YAML no início da string
- números (int grande, float pequeno/grande, -0.0) e booleanos
"""

import pytest

from shrub.core.codec import parse, parse_json, serialize, serialize_json
from shrub.core.config import CodecOptions
from shrub.core.model import BuildVariant, FunctionCall, Project, Task, shell_exec


AWKWARD_STRINGS = [
    "echo a\x85b\nc",
    "a\u2028b",
    "a\u2029b\n",
    "line1\r\nline2",
    "cr only\r",
    "\nleading break",
    "  indented first line\nnext",
    "trailing spaces  \nnext",
    "tab\there\n",
    "keep\n\n\n",
    "no final newline\nx",
    "",
    " ",
    "yes",
    "No",
    "on",
    "off",
    "null",
    "~",
    "true",
    "1.0",
    "1e3",
    "0x1F",
    "0o17",
    "1_000",
    "2020-01-01",
    "2020-01-01 10:00:00",
    ".inf",
    ".nan",
    "=",
    "<<",
    "#not a comment",
    "- dash",
    "key: value",
    "*alias",
    "&anchor",
    "!tag",
    "%directive",
    "@at",
    "`tick",
    "'single'",
    '"double"',
    "${expansion}",
    "compilação\n日本語",
    "emoji 🚀",
]

NUMBERS = [0, -1, 2**63, 10**30, 0.1, -2.5, 1e300, 1e-7, -0.0, 3.0, True, False, None]


def _project_with(value) -> Project:
    text = value if isinstance(value, str) else "x"
    return Project(
        buildvariants=[BuildVariant(name="v", expansions={"k": text})],
        tasks=[
            Task(
                name=text,
                commands=[
                    shell_exec(text, extra={"nested": [value]}),
                    FunctionCall(func="f", vars={"value": value}),
                ],
            )
        ],
        functions={"f": [shell_exec(text)]},
    )


@pytest.mark.parametrize("value", AWKWARD_STRINGS + NUMBERS, ids=repr)
def test_yaml_round_trip_of_scalar(value):
    project = _project_with(value)
    assert parse(serialize(project)) == project


@pytest.mark.parametrize("value", AWKWARD_STRINGS, ids=repr)
def test_yaml_round_trip_of_scalar_ascii_only(value):
    project = _project_with(value)
    text = serialize(project, CodecOptions(ensure_ascii=True))
    assert text.isascii()
    assert parse(text) == project


@pytest.mark.parametrize("value", AWKWARD_STRINGS + NUMBERS, ids=repr)
def test_json_round_trip_of_scalar(value):
    project = _project_with(value)
    assert parse_json(serialize_json(project)) == project


def test_unicode_breaks_are_not_emitted_as_literal_block():
    project = Project(tasks=[Task(name="t", commands=[shell_exec("echo a\x85b\nc")])])
    text = serialize(project)
    assert "script: |" not in text
    assert parse(text).tasks[0].commands[0].params["script"] == "echo a\x85b\nc"
