# src/quarkus_goal_cache/core/decision/orchestrator.py
"""
Orquestrador da decisão de cache do goal de build do Quarkus.

Máquina de estados (uma única passada, sem loops nem retries):

    Start → Classified → Validating (apenas NATIVE) → Decided
                       ↘ Decided

- Lê `quarkus.package.type` via `require`; ausente → NotCacheable
- UNSUPPORTED → NotCacheable("unsupported package type")
- UBER_JAR → Cacheable(spec)
- NATIVE → validação de container build; falha → NotCacheable
  ("non-container native build"); sucesso → Cacheable(spec)

Guardrails:
- Toda condição enraizada no conteúdo da configuração do projeto é
  convertida em `NotCacheable` com DecisionErrorPayload (nunca propaga).
- `DigestAlgorithmUnavailable` propaga: indica deploy quebrado do host.
"""

from __future__ import annotations

from typing import Optional

from quarkus_goal_cache.core import errors
from quarkus_goal_cache.core.config.reader import ConfigurationReader
from quarkus_goal_cache.core.decision.context import DecisionContext
from quarkus_goal_cache.core.decision.types import CacheDecision
from quarkus_goal_cache.core.exceptions import (
    CacheDecisionException,
    ConfigurationMissing,
    NonReproducibleNativeBuild,
    UnsupportedPackageType,
)
from quarkus_goal_cache.core.fingerprint.builder import FingerprintSpecBuilder
from quarkus_goal_cache.core.packaging.container import ContainerBuildValidator
from quarkus_goal_cache.core.packaging.mode import (
    QUARKUS_KEY_PACKAGE_TYPE,
    PackagingMode,
    classify_package_type,
)


class CacheDecisionOrchestrator:
    """Orquestrador canônico (stateless) da decisão de cache."""

    def _exception_to_error(
        self,
        exc: CacheDecisionException,
        ctx: DecisionContext,
    ) -> errors.DecisionErrorPayload:
        """Converte exceções recuperáveis em DecisionErrorPayload."""
        if isinstance(exc, ConfigurationMissing):
            return errors.configuration_missing(
                key=exc.key,
                configuration_file=ctx.configuration_file,
                hint=exc.hint,
            )
        if isinstance(exc, UnsupportedPackageType):
            return errors.unsupported_package_type(package_type=exc.details.get("package_type"))
        if isinstance(exc, NonReproducibleNativeBuild):
            return errors.non_reproducible_native_build(
                container_build=exc.details.get("container_build"),
                builder_image=exc.details.get("builder_image"),
            )
        return errors.DecisionErrorPayload(
            type=exc.__class__.__name__,
            message=str(exc),
            details=dict(exc.details),
            hint=exc.hint,
        )

    def _decline(
        self,
        ctx: DecisionContext,
        exc: CacheDecisionException,
        *,
        mode: Optional[PackagingMode] = None,
    ) -> CacheDecision:
        error = self._exception_to_error(exc, ctx)
        ctx.log(
            level="info",
            message=f"Caching disabled for Quarkus build, {error.message}",
            error_type=error.type,
        )
        return CacheDecision.not_cacheable(reason=error.message, mode=mode, error=error)

    def _build(self, ctx: DecisionContext, mode: PackagingMode) -> CacheDecision:
        spec = FingerprintSpecBuilder(ctx).build(mode)
        ctx.log(level="info", message="Cache configurado para o build do Quarkus", mode=mode.value)
        return CacheDecision.cacheable(mode=mode, spec=spec)

    def decide(self, ctx: DecisionContext) -> CacheDecision:
        reader = ConfigurationReader(ctx)

        try:
            package_type = reader.require(QUARKUS_KEY_PACKAGE_TYPE)
        except ConfigurationMissing as e:
            return self._decline(ctx, e)

        mode = classify_package_type(package_type)

        if not mode.is_cacheable_candidate:
            return self._decline(
                ctx,
                UnsupportedPackageType(
                    message="unsupported package type",
                    details={"package_type": package_type},
                ),
                mode=mode,
            )

        if mode is PackagingMode.UBER_JAR:
            ctx.log(level="info", message="Configurando cache para build uber-jar do Quarkus")
            return self._build(ctx, mode)

        ctx.log(level="info", message="Configurando cache para build nativo do Quarkus")
        check = ContainerBuildValidator(reader).inspect()
        if not check.is_reproducible:
            ctx.add_warning("Caching disabled for Quarkus build, please use stable container build")
            return self._decline(
                ctx,
                NonReproducibleNativeBuild(
                    message="non-container native build",
                    details={
                        "container_build": check.container_build,
                        "builder_image": check.builder_image,
                    },
                ),
                mode=mode,
            )

        return self._build(ctx, mode)


def decide(ctx: DecisionContext) -> CacheDecision:
    """Atalho funcional: `CacheDecisionOrchestrator().decide(ctx)`."""
    return CacheDecisionOrchestrator().decide(ctx)
