# src/quarkus_goal_cache/host/protocols.py
"""
Contratos consumidos do host de build cache.

Estes protocolos descrevem apenas o que o adapter usa da API do host:
registro de um provider de metadados, identificação do goal corrente e
os builders de inputs/outputs. A conformidade é estrutural
(`@runtime_checkable`), sem herança obrigatória.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from quarkus_goal_cache.core.fingerprint.spec import NormalizationStrategy


@runtime_checkable
class FileSetBuilder(Protocol):
    def include(self, *patterns: str) -> "FileSetBuilder":
        ...

    def normalization_strategy(self, strategy: NormalizationStrategy) -> "FileSetBuilder":
        ...


@runtime_checkable
class InputsBuilder(Protocol):
    def file_set(
        self,
        name: str,
        configure: Callable[[FileSetBuilder], Any],
        root: Optional[str] = None,
    ) -> "InputsBuilder":
        ...

    def properties(self, *names: str) -> "InputsBuilder":
        ...

    def property(self, name: str, value: str) -> "InputsBuilder":
        ...

    def ignore(self, *names: str) -> "InputsBuilder":
        ...


@runtime_checkable
class OutputFileBuilder(Protocol):
    def cacheable(self, reason: str) -> Any:
        ...


@runtime_checkable
class OutputsBuilder(Protocol):
    def file(self, name: str, path: str) -> OutputFileBuilder:
        ...


@runtime_checkable
class MetadataContext(Protocol):
    """Contexto entregue pelo host a cada execução de goal."""

    plugin_id: str
    execution_id: str
    project_dir: Path

    def with_plugin(self, plugin_id: str, action: Callable[[], Any]) -> None:
        """Executa `action` apenas se o goal corrente pertencer a `plugin_id`."""
        ...

    def inputs(self, configure: Callable[[InputsBuilder], Any]) -> "MetadataContext":
        ...

    def outputs(self, configure: Callable[[OutputsBuilder], Any]) -> "MetadataContext":
        ...


@runtime_checkable
class BuildCacheApi(Protocol):
    def register_metadata_provider(self, provider: Callable[[MetadataContext], Any]) -> None:
        ...
