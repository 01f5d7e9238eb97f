"""Adapter de arquivo para documentos de projeto (YAML/JSON).

Notas:
- YAML é preferencial, JSON é alternativo.
- O formato é inferido pela extensão do arquivo.
- Erros do Codec (MalformedDocument, SchemaMismatch, SerializationFailure)
  propagam sem alteração.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .core.codec import parse, parse_json, serialize, serialize_json
from .core.config.options import CodecOptions
from .core.model import Project

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_YAML_SUFFIXES = {".yml", ".yaml"}
_JSON_SUFFIXES = {".json"}


class ProjectFileError(Exception):
    """Erro base do adapter de arquivo."""


class ProjectFileNotFoundError(ProjectFileError):
    """Arquivo de projeto não existe no caminho informado."""


class UnsupportedProjectFormatError(ProjectFileError):
    """Extensão de arquivo não suportada (YAML/JSON)."""


def _format_of(p: Path) -> str:
    suffix = p.suffix.lower()
    if suffix in _YAML_SUFFIXES:
        return "yaml"
    if suffix in _JSON_SUFFIXES:
        return "json"
    raise UnsupportedProjectFormatError(f"unsupported project format: {suffix or '<none>'}")


def load_project(path: PathLike) -> Project:
    """Carrega um Project a partir de arquivo YAML/JSON.

    Raises:
        UnsupportedProjectFormatError: se extensão não suportada.
        ProjectFileNotFoundError: se arquivo não existir.
    """
    p = Path(path)
    fmt = _format_of(p)
    if not p.exists():
        raise ProjectFileNotFoundError(f"project file not found: {p}")

    raw = p.read_text(encoding="utf-8")
    project = parse(raw) if fmt == "yaml" else parse_json(raw)
    logger.debug("Loaded %s project from %s", fmt, p)
    return project


def save_project(project: Project, path: PathLike, options: Optional[CodecOptions] = None) -> Path:
    """Serializa e grava um Project; retorna o caminho escrito."""
    p = Path(path)
    fmt = _format_of(p)
    text = serialize(project, options) if fmt == "yaml" else serialize_json(project, options)

    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    logger.debug("Saved %s project to %s", fmt, p)
    return p
