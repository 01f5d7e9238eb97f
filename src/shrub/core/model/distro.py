# src/shrub/core/model/distro.py
"""Distros: identificadores de plataformas de execução."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Distro:
    """Distro referenciada por nome em `BuildVariant.run_on` e `TaskRef.distros`."""

    name: str = ""
    arch: Optional[str] = None
    platform: Optional[str] = None
