# src/quarkus_goal_cache/core/decision/types.py
"""
Tipos canônicos da decisão de cache.

Componentes principais:
    - DecisionStatus → enum de estados finais (CACHEABLE, NOT_CACHEABLE)
    - CacheDecision  → resultado imutável de uma decisão

Invariantes:
    - Exatamente uma decisão por execução de goal
    - CACHEABLE sempre carrega `spec`; NOT_CACHEABLE sempre carrega `reason`
    - Não existem estados parciais ou de retry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from quarkus_goal_cache.core.errors import DecisionErrorPayload
from quarkus_goal_cache.core.fingerprint.spec import FingerprintSpec
from quarkus_goal_cache.core.packaging.mode import PackagingMode


class DecisionStatus(str, Enum):
    """
    Estados finais possíveis de uma decisão de cache.

    Estados definidos:
        - CACHEABLE: o goal é cacheável; o spec deve ser registrado no host
        - NOT_CACHEABLE: cache recusado; nenhum input/output é registrado
    """
    CACHEABLE = "cacheable"
    NOT_CACHEABLE = "not_cacheable"


@dataclass(frozen=True)
class CacheDecision:
    """
    Resultado imutável da decisão de cache de uma execução de goal.

    Campos:
        - status: estado final da decisão
        - mode: modo de empacotamento classificado (None se a chave faltou)
        - spec: FingerprintSpec (apenas CACHEABLE)
        - reason: motivo legível da recusa (apenas NOT_CACHEABLE)
        - error: payload estruturado da recusa (apenas NOT_CACHEABLE)
    """
    status: DecisionStatus
    mode: Optional[PackagingMode] = None
    spec: Optional[FingerprintSpec] = None
    reason: Optional[str] = None
    error: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def cacheable(cls, *, mode: PackagingMode, spec: FingerprintSpec) -> "CacheDecision":
        return cls(status=DecisionStatus.CACHEABLE, mode=mode, spec=spec)

    @classmethod
    def not_cacheable(
        cls,
        *,
        reason: str,
        mode: Optional[PackagingMode] = None,
        error: Optional[DecisionErrorPayload] = None,
    ) -> "CacheDecision":
        return cls(
            status=DecisionStatus.NOT_CACHEABLE,
            mode=mode,
            reason=reason,
            error=error.to_dict() if error is not None else {},
        )

    @property
    def is_cacheable(self) -> bool:
        return self.status is DecisionStatus.CACHEABLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "mode": self.mode.value if self.mode is not None else None,
            "spec": self.spec.to_dict() if self.spec is not None else None,
            "reason": self.reason,
            "error": dict(self.error),
        }
