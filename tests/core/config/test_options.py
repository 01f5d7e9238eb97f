# tests/core/config/test_options.py
"""Testes de `CodecOptions`: defaults, materialização estrita e imutabilidade."""

import dataclasses

import pytest

from shrub.core.config import DEFAULT_OPTIONS, CodecOptions, InvalidCodecOptionError


def test_defaults():
    assert DEFAULT_OPTIONS == CodecOptions()
    assert DEFAULT_OPTIONS.to_dict() == {
        "yaml_indent": 2,
        "yaml_width": 4096,
        "explicit_start": False,
        "json_indent": 2,
        "ensure_ascii": False,
        "preserve_unknown_keys": True,
    }


def test_from_dict_partial():
    opts = CodecOptions.from_dict({"json_indent": 0})
    assert opts.json_indent == 0
    assert opts.yaml_indent == 2


def test_from_dict_round_trip():
    opts = CodecOptions(yaml_indent=4, ensure_ascii=True)
    assert CodecOptions.from_dict(opts.to_dict()) == opts


@pytest.mark.parametrize(
    "data",
    [
        {"unknown": 1},
        {"yaml_indent": True},
        {"yaml_indent": "2"},
        {"yaml_indent": 2.0},
        {"explicit_start": 1},
        {"json_indent": -1},
        ["yaml_indent"],
    ],
)
def test_from_dict_rejects_invalid(data):
    with pytest.raises(InvalidCodecOptionError):
        CodecOptions.from_dict(data)


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.yaml_indent = 8
