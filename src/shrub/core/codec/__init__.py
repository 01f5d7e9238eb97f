# src/shrub/core/codec/__init__.py
"""shrub: Codec (core).

Conversão bidirecional entre texto e o Schema Model:
 - YAML (formato primário): `parse` / `serialize`
 - JSON (intercâmbio): `parse_json` / `serialize_json`
 - camada independente de formato: `project_from_dict` / `project_to_dict`

Lei de round-trip: `parse(serialize(p)) == p` para todo Project construído
pelos construtores do modelo.
"""

from .errors import (  # noqa: F401
    CodecError,
    MalformedDocument,
    SchemaMismatch,
    SerializationFailure,
)
from .json_codec import parse_json, serialize_json  # noqa: F401
from .mapping import PROJECT_KEYS, project_from_dict, project_to_dict  # noqa: F401
from .yaml_codec import parse, serialize  # noqa: F401
