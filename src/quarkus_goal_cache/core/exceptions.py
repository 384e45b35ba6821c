"""
Quarkus Goal Cache: Canonical Exceptions (v1)

Este módulo define exceções tipadas internas da decisão de cache.

Objetivo:
- Permitir que reader/validator/builder levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para DecisionErrorPayload
- Evitar ValueError/RuntimeError genéricos nos guardrails da decisão

Regras:
- Exceções enraizadas no conteúdo da configuração do projeto são sempre
  recuperadas pelo orquestrador em uma decisão `NotCacheable`.
- `DigestAlgorithmUnavailable` é a exceção: indica deploy quebrado e é fatal.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CacheDecisionException(Exception):
    """Base class para exceções internas da decisão de cache.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Configuração do projeto (recuperáveis)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigurationMissing(CacheDecisionException):
    """Chave obrigatória ausente no application.properties (ou arquivo ilegível)."""

    @classmethod
    def for_key(cls, key: str) -> "ConfigurationMissing":
        return cls(
            message=f"Property [{key}] is not set",
            details={"key": key},
            hint=f"Defina a propriedade [{key}] no application.properties para permitir cache do goal.",
        )

    @property
    def key(self) -> str:
        return str(self.details.get("key", ""))


@dataclass(frozen=True)
class UnsupportedPackageType(CacheDecisionException):
    """O valor de `quarkus.package.type` não corresponde a um modo cacheável."""


@dataclass(frozen=True)
class NonReproducibleNativeBuild(CacheDecisionException):
    """Build nativo fora de container com builder image fixada."""


# ---------------------------------------------------------------------------
# Runtime do host (fatal)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DigestAlgorithmUnavailable(CacheDecisionException):
    """O algoritmo de digest exigido não está disponível no runtime."""
