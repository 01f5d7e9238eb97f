# src/shrub/core/hashing.py
"""Hashing canônico de um Project.

O hash identifica a estrutura do projeto independentemente de formatação,
comentários e ordem de chaves do texto de origem. Serve para detectar se
uma configuração regenerada mudou de fato.

Decisão: o hash é calculado a partir de JSON canônico (sort_keys, separators)
de `project_to_dict`, sem as chaves de topo desconhecidas (`extras`), que
também não participam da igualdade estrutural.
"""

from __future__ import annotations

import hashlib
import json

from .codec.errors import SerializationFailure
from .codec.mapping import project_to_dict
from .model import Project


def compute_project_hash(project: Project) -> str:
    """Computa SHA-256 do Project em formato canônico."""
    data = project_to_dict(project, include_extras=False)
    try:
        canonical = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise SerializationFailure(f"cannot hash project: {exc}") from exc
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
