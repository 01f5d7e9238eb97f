"""
shrub: modelo tipado e codec para arquivos de configuração de projetos de CI.

Este pacote raiz define o namespace público do shrub: um modelo de dados
em memória para projetos de CI (tasks, build variants, functions, task
groups) e a conversão bidirecional entre esse modelo e o texto do
documento de projeto.

Arquitetura em alto nível:
    - core.model      → entidades do projeto (dataclasses)
    - core.codec      → parse/serialize YAML e JSON
    - core.config     → opções do codec (defaults + override local)
    - core.expansions → precedência entre escopos de variáveis
    - core.hashing    → hash canônico de um Project
    - files           → leitura/escrita de arquivos de projeto

Limites explícitos:
    - Não executa tasks nem agenda builds
    - Não valida semântica entre entidades (nomes referenciados existem etc.)
    - Não preserva comentários ou formatação do texto original
"""

from .core.codec import parse, parse_json, serialize, serialize_json  # noqa: F401
from .core.model import Project  # noqa: F401
from .files import load_project, save_project  # noqa: F401

__all__ = [
    "Project",
    "parse",
    "parse_json",
    "serialize",
    "serialize_json",
    "load_project",
    "save_project",
]
