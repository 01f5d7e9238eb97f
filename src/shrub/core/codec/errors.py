# src/shrub/core/codec/errors.py
"""
Exceções canônicas do Codec.

Princípios fundamentais:
    - Nenhuma coerção silenciosa: valores fora do tipo declarado são erro
    - Nenhum resultado parcial é retornado após uma falha
    - Quando aplicável, o erro carrega o caminho (JSON pointer) do campo

Hierarquia:
    - CodecError
        - MalformedDocument    → texto não é YAML/JSON válido
        - SchemaMismatch       → valor presente com forma incompatível
        - SerializationFailure → valor em memória não representável
"""

from __future__ import annotations

from typing import Optional


class CodecError(Exception):
    """Erro base do Codec."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{message} (at {path})" if path else message)


class MalformedDocument(CodecError):
    """O texto de entrada não respeita a gramática YAML/JSON."""


class SchemaMismatch(CodecError):
    """Um valor existe mas não tem a forma declarada para o campo."""


class SerializationFailure(CodecError):
    """Um valor do modelo não pode ser representado no formato de saída."""
