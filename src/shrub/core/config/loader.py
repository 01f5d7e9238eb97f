# src/shrub/core/config/loader.py
"""
Resolução das opções do Codec a partir de arquivos.

Fontes, em ordem de precedência crescente:
    1. arquivo de defaults (obrigatório)
    2. arquivo local de overrides (opcional; ignorado quando não existe)

Ambos podem ser YAML (.yaml/.yml) ou JSON (.json), inferidos pela extensão.
Um arquivo vazio equivale a `{}`.

Limites explícitos:
    - Não carrega documentos de projeto (ver `shrub.files`)
    - Não lê variáveis de ambiente
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml

from .errors import (
    ConfigParseError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .options import CodecOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_READERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _read_options_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de opções e devolve seu conteúdo como dicionário.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for YAML/JSON.
        ConfigParseError: Se o conteúdo não puder ser parseado.
        InvalidConfigRootTypeError: Se a raiz não for um mapping.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Options file not found: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(f"Unsupported options format: {path.suffix or '<none>'}")

    raw = path.read_text(encoding="utf-8")
    try:
        data = reader(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigParseError(f"Failed to parse options file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(f"Options root must be a mapping, got: {type(data).__name__}")

    logger.debug("Read codec options from %s (%d keys)", path, len(data))
    return data


def load_codec_options(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> CodecOptions:
    """
    Carrega as opções efetivas do Codec.

    O merge entre defaults e local é estrito: trocar o tipo de uma opção
    no arquivo local é erro, não override.

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se algum arquivo tiver extensão não suportada.
        ConfigParseError: Se algum arquivo estiver malformado.
        InvalidConfigRootTypeError: Se a raiz de algum arquivo não for um mapping.
        ConfigTypeConflictError: Se o local trocar o tipo de alguma opção.
        InvalidCodecOptionError: Se alguma opção for desconhecida ou inválida.
    """
    resolved = _read_options_file(Path(defaults_path))

    if local_path is not None:
        local = Path(local_path)
        if not local.exists():
            logger.debug("No local options file at %s", local)
        else:
            resolved = deep_merge(resolved, _read_options_file(local))

    return CodecOptions.from_dict(resolved)
