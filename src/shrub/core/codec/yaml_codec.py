# src/shrub/core/codec/yaml_codec.py
"""
Codec YAML: formato primário do documento de projeto.

Notas:
    - Parsing via SafeLoader (nenhuma tag arbitrária é construída), sem
      resolução implícita de timestamps: `2020-01-01` é lido como string
    - Emissão sem ordenação de chaves, sem âncoras/aliases e com scripts
      multilinha em bloco literal (`|`), para leitura humana; strings com
      quebras Unicode ou CR saem entre aspas duplas, com escapes
    - Comentários e formatação originais não são preservados; o texto
      reemitido é semanticamente equivalente, não idêntico byte a byte
"""

from __future__ import annotations

import logging
from typing import Optional

import yaml

from ..config.options import DEFAULT_OPTIONS, CodecOptions
from ..model import Project
from .errors import MalformedDocument, SerializationFailure
from .mapping import project_from_dict, project_to_dict

logger = logging.getLogger(__name__)


_STR_TAG = "tag:yaml.org,2002:str"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"

# quebras que o scanner normaliza para "\n" (ou dobra) ao reler escalares
# em bloco ou com aspas simples
_UNSAFE_BREAKS = ("\r", "\x85", "\u2028", "\u2029")


class _ProjectLoader(yaml.SafeLoader):
    """SafeLoader sem resolução implícita de timestamps (datas ficam string)."""


_ProjectLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _ProjectDumper(yaml.SafeDumper):
    """SafeDumper sem aliases e com strings multilinha em bloco literal."""

    def ignore_aliases(self, data):
        return True


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if any(ch in data for ch in _UNSAFE_BREAKS):
        return dumper.represent_scalar(_STR_TAG, data, style='"')
    if "\n" in data:
        return dumper.represent_scalar(_STR_TAG, data, style="|")
    return dumper.represent_scalar(_STR_TAG, data)


_ProjectDumper.add_representer(str, _represent_str)


def parse(text: str) -> Project:
    """
    Converte um documento YAML em Project.

    Raises:
        MalformedDocument: Se o texto não for YAML bem formado.
        SchemaMismatch: Se algum campo não tiver a forma declarada.
    """
    try:
        data = yaml.load(text, Loader=_ProjectLoader)
    except yaml.YAMLError as exc:
        raise MalformedDocument(f"invalid YAML document: {exc}") from exc

    project = project_from_dict(data)
    logger.debug(
        "Parsed YAML project: %d tasks, %d build variants, %d functions",
        len(project.tasks),
        len(project.buildvariants),
        len(project.functions),
    )
    return project


def serialize(project: Project, options: Optional[CodecOptions] = None) -> str:
    """
    Serializa um Project em YAML.

    A saída é determinística: o mesmo Project sempre produz o mesmo texto.

    Raises:
        SerializationFailure: Se algum valor não puder ser representado.
    """
    opts = options or DEFAULT_OPTIONS
    data = project_to_dict(project, include_extras=opts.preserve_unknown_keys)

    try:
        text = yaml.dump(
            data,
            Dumper=_ProjectDumper,
            default_flow_style=False,
            sort_keys=False,
            indent=opts.yaml_indent,
            width=opts.yaml_width,
            allow_unicode=not opts.ensure_ascii,
            explicit_start=opts.explicit_start,
        )
    except yaml.YAMLError as exc:
        raise SerializationFailure(f"cannot represent project as YAML: {exc}") from exc

    logger.debug("Serialized project to YAML (%d chars)", len(text))
    return text
