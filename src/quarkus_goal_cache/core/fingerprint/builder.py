# src/quarkus_goal_cache/core/fingerprint/builder.py
"""
Construção do FingerprintSpec para os modos NATIVE e UBER_JAR.

Os mesmos inputs lógicos governam os dois modos: a identidade do artefato
depende de fontes + configuração + ambiente, independente do formato final.
O jar gerado também depende do SO, por isso as propriedades de plataforma
participam em ambos os casos.

Apenas o output declarado difere entre os modos:
    - NATIVE   → executável `exe` em caminho qualificado por versão
    - UBER_JAR → jar `jar` casado por glob qualificado por versão
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Dict, Tuple

from quarkus_goal_cache.core.exceptions import UnsupportedPackageType
from quarkus_goal_cache.core.fingerprint.environment import EnvironmentFingerprinter
from quarkus_goal_cache.core.fingerprint.spec import (
    FileSetInput,
    FingerprintSpec,
    NormalizationStrategy,
    OutputDeclaration,
)
from quarkus_goal_cache.core.packaging.mode import PackagingMode

if TYPE_CHECKING:
    from quarkus_goal_cache.core.decision.context import DecisionContext


# Campos do goal de build do plugin que afetam o artefato empacotado.
GOAL_PROPERTIES: Tuple[str, ...] = (
    "appArtifact",
    "closeBootstrappedApp",
    "finalName",
    "ignoredEntries",
    "manifestEntries",
    "manifestSections",
    "skip",
    "skipOriginalJarRename",
    "systemProperties",
    "properties",
)

# Campos que o host trataria como input, mas cuja identidade varia sem afetar o output.
IGNORED_FIELDS: Tuple[str, ...] = (
    "project",
    "buildDir",
    "mojoExecution",
    "session",
    "repoSession",
    "repos",
    "pluginRepos",
)

QUARKUS_PROPERTIES_INPUT = "quarkusProperties"
GENERATED_SOURCES_INPUT = "generatedSourcesDirectory"

ENV_PROPERTY = "quarkusEnv"
OS_NAME_PROPERTY = "osName"
OS_VERSION_PROPERTY = "osVersion"
OS_ARCH_PROPERTY = "osArch"

NATIVE_OUTPUT_NAME = "exe"
NATIVE_OUTPUT_PATH = "${project.build.directory}/${project.name}-${project.version}-runner"
UBERJAR_OUTPUT_NAME = "jar"
UBERJAR_OUTPUT_PATH = "${project.build.directory}/${project.name}-${project.version}-*.jar"

CACHEABLE_REASON = "this plugin has CPU-bound goals with well-defined inputs and outputs"


class FingerprintSpecBuilder:
    """Monta inputs e outputs declarados de um goal cacheável."""

    def __init__(self, ctx: "DecisionContext"):
        self.ctx = ctx
        self.fingerprinter = EnvironmentFingerprinter(ctx.environment)

    def _file_sets(self) -> Tuple[FileSetInput, ...]:
        configuration_file = PurePosixPath(self.ctx.configuration_file)
        return (
            FileSetInput(
                name=QUARKUS_PROPERTIES_INPUT,
                root=str(configuration_file.parent),
                includes=(configuration_file.name,),
                normalization=NormalizationStrategy.RELATIVE_PATH,
            ),
            FileSetInput(name=GENERATED_SOURCES_INPUT),
        )

    def _computed_properties(self) -> Dict[str, str]:
        platform = self.ctx.platform
        return {
            ENV_PROPERTY: self.fingerprinter.fingerprint(self.ctx.environment_prefix),
            OS_NAME_PROPERTY: platform.os_name(),
            OS_VERSION_PROPERTY: platform.os_version(),
            OS_ARCH_PROPERTY: platform.os_arch(),
        }

    def _output(self, mode: PackagingMode) -> OutputDeclaration:
        if mode is PackagingMode.NATIVE:
            return OutputDeclaration(name=NATIVE_OUTPUT_NAME, path=NATIVE_OUTPUT_PATH, reason=CACHEABLE_REASON)
        if mode is PackagingMode.UBER_JAR:
            return OutputDeclaration(name=UBERJAR_OUTPUT_NAME, path=UBERJAR_OUTPUT_PATH, reason=CACHEABLE_REASON)
        raise UnsupportedPackageType(
            message="unsupported package type",
            details={"mode": mode.value},
        )

    def build(self, mode: PackagingMode) -> FingerprintSpec:
        """
        Constrói o FingerprintSpec para `mode`.

        Raises:
            UnsupportedPackageType: Se `mode` for UNSUPPORTED.
            DigestAlgorithmUnavailable: Se o digest do ambiente não puder ser calculado.
        """
        output = self._output(mode)
        return FingerprintSpec(
            file_sets=self._file_sets(),
            properties=GOAL_PROPERTIES,
            computed_properties=self._computed_properties(),
            ignored=IGNORED_FIELDS,
            outputs=(output,),
        )
