# src/quarkus_goal_cache/core/platform.py
"""
Providers read-only de ambiente e plataforma.

Variáveis de ambiente do processo e propriedades do host (nome, versão e
arquitetura do sistema operacional) são estado global ambiente. Este
módulo as abstrai atrás de providers injetáveis, para que:
    - o orquestrador nunca leia `os.environ`/`platform` diretamente
    - testes forneçam mapas fixos em vez do ambiente real

Invariantes:
    - Providers nunca mutam o ambiente
    - `environ()` retorna sempre um snapshot independente (dict novo)
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass, field
from typing import Dict, Mapping, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentProvider(Protocol):
    """Contrato mínimo de leitura de variáveis de ambiente."""

    def environ(self) -> Dict[str, str]:
        ...


@runtime_checkable
class PlatformProvider(Protocol):
    """Contrato mínimo de leitura das propriedades do host."""

    def os_name(self) -> str:
        ...

    def os_version(self) -> str:
        ...

    def os_arch(self) -> str:
        ...


class ProcessEnvironment:
    """Ambiente real do processo corrente."""

    def environ(self) -> Dict[str, str]:
        return dict(os.environ)


class HostPlatform:
    """Plataforma real do host (módulo `platform` da stdlib)."""

    def os_name(self) -> str:
        return platform.system()

    def os_version(self) -> str:
        return platform.release()

    def os_arch(self) -> str:
        return platform.machine()


@dataclass(frozen=True)
class StaticEnvironment:
    """Ambiente fixo (testes e adapters que já resolveram o ambiente)."""

    variables: Mapping[str, str] = field(default_factory=dict)

    def environ(self) -> Dict[str, str]:
        return dict(self.variables)


@dataclass(frozen=True)
class StaticPlatform:
    """Plataforma fixa (testes e adapters)."""

    name: str = "Linux"
    version: str = "6.0.0"
    arch: str = "x86_64"

    def os_name(self) -> str:
        return self.name

    def os_version(self) -> str:
        return self.version

    def os_arch(self) -> str:
        return self.arch
