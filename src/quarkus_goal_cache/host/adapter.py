# src/quarkus_goal_cache/host/adapter.py
"""
Host Adapter (v1)

Objetivo:
- Registrar o provider de metadados uma única vez na API do host.
- Filtrar o goal: plugin `quarkus-maven-plugin`, execution id `build`.
- Delegar a decisão ao core (`CacheDecisionOrchestrator.decide`).
- Traduzir o FingerprintSpec em chamadas aos builders `inputs`/`outputs`.

Regras:
- NotCacheable → nenhum builder é chamado (o host mantém o goal fora do cache).
- NÃO decide nada sozinho; NÃO lê configuração do projeto.
- Eventos da decisão podem ser encaminhados a um sink do host.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from quarkus_goal_cache.core.config.loader import load_settings
from quarkus_goal_cache.core.decision.context import DecisionContext
from quarkus_goal_cache.core.decision.orchestrator import CacheDecisionOrchestrator
from quarkus_goal_cache.core.decision.types import CacheDecision
from quarkus_goal_cache.core.fingerprint.spec import (
    FileSetInput,
    FingerprintSpec,
    NormalizationStrategy,
)
from quarkus_goal_cache.core.platform import EnvironmentProvider, PlatformProvider

from .protocols import (
    BuildCacheApi,
    FileSetBuilder,
    InputsBuilder,
    MetadataContext,
    OutputsBuilder,
)


EventSink = Callable[[Dict[str, Any]], Any]


def _configure_file_set(file_set: FileSetInput) -> Callable[[FileSetBuilder], Any]:
    def configure(builder: FileSetBuilder) -> Any:
        if file_set.includes:
            builder.include(*file_set.includes)
        if file_set.normalization is not NormalizationStrategy.DEFAULT:
            builder.normalization_strategy(file_set.normalization)
        return builder

    return configure


def apply_inputs(spec: FingerprintSpec, inputs: InputsBuilder) -> InputsBuilder:
    for file_set in spec.file_sets:
        inputs.file_set(file_set.name, _configure_file_set(file_set), root=file_set.root)
    inputs.properties(*spec.properties)
    for name, value in spec.computed_properties.items():
        inputs.property(name, value)
    inputs.ignore(*spec.ignored)
    return inputs


def apply_outputs(spec: FingerprintSpec, outputs: OutputsBuilder) -> OutputsBuilder:
    for output in spec.outputs:
        outputs.file(output.name, output.path).cacheable(output.reason)
    return outputs


def apply_decision(decision: CacheDecision, context: MetadataContext) -> bool:
    """Registra o spec no host; retorna False (sem chamadas) quando recusado."""
    if not decision.is_cacheable or decision.spec is None:
        return False
    spec = decision.spec
    context.inputs(lambda inputs: apply_inputs(spec, inputs))
    context.outputs(lambda outputs: apply_outputs(spec, outputs))
    return True


class QuarkusCachingConfig:
    """
    Instruções de cache do goal de build do plugin Maven do Quarkus.

    Os settings efetivos são resolvidos uma única vez, na construção:
    defaults embutidos, depois o arquivo em `settings_path` (se existir),
    depois o dict `settings` (pode ser parcial).

    Raises:
        SettingsError: Se os settings resolvidos forem inválidos.
    """

    def __init__(
        self,
        *,
        settings: Optional[Dict[str, Any]] = None,
        settings_path: Optional[str] = None,
        environment: Optional[EnvironmentProvider] = None,
        platform: Optional[PlatformProvider] = None,
        event_sink: Optional[EventSink] = None,
    ):
        self.settings = load_settings(local_path=settings_path, overrides=settings)
        self.environment = environment
        self.platform = platform
        self.event_sink = event_sink
        self.orchestrator = CacheDecisionOrchestrator()

    def configure_quarkus_plugin_cache(self, build_cache: BuildCacheApi) -> None:
        build_cache.register_metadata_provider(self.provide)

    def provide(self, context: MetadataContext) -> None:
        context.with_plugin(str(self.settings["plugin_id"]), lambda: self.on_plugin_execution(context))

    def _new_context(self, context: MetadataContext) -> DecisionContext:
        kwargs: Dict[str, Any] = {
            "project_dir": context.project_dir,
            "plugin_id": str(self.settings["plugin_id"]),
            "execution_id": context.execution_id,
            "settings": dict(self.settings),
        }
        if self.environment is not None:
            kwargs["environment"] = self.environment
        if self.platform is not None:
            kwargs["platform"] = self.platform
        return DecisionContext(**kwargs)

    def on_plugin_execution(self, context: MetadataContext) -> Optional[CacheDecision]:
        if context.execution_id != self.settings["execution_id"]:
            return None

        ctx = self._new_context(context)
        try:
            decision = self.orchestrator.decide(ctx)
        finally:
            if self.event_sink is not None:
                for event in ctx.events:
                    self.event_sink(event)

        apply_decision(decision, context)
        return decision
