# src/quarkus_goal_cache/core/decision/context.py
"""
DecisionContext: Contexto canônico de uma decisão de cache.

Este módulo define o **DecisionContext**, a estrutura passada ao
orquestrador a cada execução de goal avaliada pelo host.

O DecisionContext é o **único meio permitido** de:
- identificar o goal avaliado (plugin id + execution id)
- localizar o projeto (diretório raiz) e os settings efetivos
- acessar ambiente e plataforma (via providers injetáveis)
- registrar logs estruturados da decisão
- coletar warnings não fatais

Princípios fundamentais:
- Isolamento por execução (cada goal possui seu próprio contexto)
- Nenhum componente lê estado global diretamente
- Nenhum estado é carregado de uma decisão para a próxima
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from quarkus_goal_cache.core.config.loader import default_settings
from quarkus_goal_cache.core.platform import (
    EnvironmentProvider,
    HostPlatform,
    PlatformProvider,
    ProcessEnvironment,
)


@dataclass
class DecisionContext:
    """
    Contexto de uma decisão de cache para uma execução de goal.

    Campos canônicos:
    - project_dir: diretório raiz do projeto (base de caminhos relativos)
    - plugin_id / execution_id: identidade do goal avaliado
    - settings: settings efetivos da extensão (ver `core.config.loader`)
    - environment / platform: providers read-only
    - warnings: warnings não fatais da decisão
    - events: log estruturado de eventos
    """

    project_dir: Path
    plugin_id: str = ""
    execution_id: str = ""
    settings: Dict[str, Any] = field(default_factory=default_settings)
    environment: EnvironmentProvider = field(default_factory=ProcessEnvironment)
    platform: PlatformProvider = field(default_factory=HostPlatform)
    created_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    warnings: List[str] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.project_dir = Path(self.project_dir)
        if not self.plugin_id:
            self.plugin_id = str(self.settings["plugin_id"])
        if not self.execution_id:
            self.execution_id = str(self.settings["execution_id"])

    @property
    def goal(self) -> str:
        return f"{self.plugin_id}:{self.execution_id}"

    @property
    def configuration_file(self) -> str:
        return str(self.settings["configuration_file"])

    @property
    def environment_prefix(self) -> str:
        return str(self.settings["environment_prefix"])

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "goal": self.goal,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)
        self.log(level="warning", message=message)
