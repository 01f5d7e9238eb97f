# src/shrub/core/codec/json_codec.py
"""Codec JSON: formato de intercâmbio para ferramentas que consomem a configuração exportada."""

from __future__ import annotations

import json
import logging
import math
from typing import Optional

from ..config.options import DEFAULT_OPTIONS, CodecOptions
from ..model import Project
from .errors import MalformedDocument, SerializationFailure
from .mapping import project_from_dict, project_to_dict

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def parse_json(text: str) -> Project:
    """
    Converte um documento JSON (RFC 8259) em Project.

    `NaN`, `Infinity` e `-Infinity` não são JSON válido e são rejeitados, assim
    como números que estouram o intervalo de float (ex.: `1e400`).

    Raises:
        MalformedDocument: Se o texto não for JSON bem formado.
        SchemaMismatch: Se algum campo não tiver a forma declarada.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)
    except ValueError as exc:
        raise MalformedDocument(f"invalid JSON document: {exc}") from exc

    project = project_from_dict(data)
    logger.debug("Parsed JSON project: %d tasks, %d build variants", len(project.tasks), len(project.buildvariants))
    return project


def serialize_json(project: Project, options: Optional[CodecOptions] = None) -> str:
    """
    Serializa um Project em JSON (ordem de chaves preservada, sem NaN/Infinity).

    Raises:
        SerializationFailure: Se algum valor não puder ser representado em JSON.
    """
    opts = options or DEFAULT_OPTIONS
    data = project_to_dict(project, include_extras=opts.preserve_unknown_keys)

    try:
        text = json.dumps(
            data,
            indent=opts.json_indent,
            ensure_ascii=opts.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationFailure(f"cannot represent project as JSON: {exc}") from exc

    return text + "\n"
