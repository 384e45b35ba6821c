# src/quarkus_goal_cache/core/packaging/mode.py
"""
Classificação do modo de empacotamento do Quarkus.

Mapeia o valor de `quarkus.package.type` para um `PackagingMode`:
    - "native" (igualdade exata)          → NATIVE
    - valor que contém "uber-jar"         → UBER_JAR
    - qualquer outro valor                → UNSUPPORTED

Nota sobre UBER_JAR:
    O match por substring é uma leniência herdada, aparentemente não
    intencional. É preservado e documentado (não "corrigido"), pois o
    comportamento esperado é ambíguo. Consequência: "my-uber-jar-v2" é UBER_JAR.

Sem normalização: case-sensitive, sem trim. Os valores vêm de um
vocabulário de configuração controlado.
"""

from __future__ import annotations

from enum import Enum


QUARKUS_KEY_PACKAGE_TYPE = "quarkus.package.type"
QUARKUS_VALUE_PACKAGE_NATIVE = "native"
QUARKUS_VALUE_PACKAGE_UBERJAR = "uber-jar"


class PackagingMode(str, Enum):
    """
    Modos de empacotamento conhecidos.

    Derivado uma única vez por execução de goal; imutável durante a decisão.
    Os valores são strings para facilitar serialização da decisão.
    """
    NATIVE = "native"
    UBER_JAR = "uber-jar"
    UNSUPPORTED = "unsupported"

    @property
    def is_cacheable_candidate(self) -> bool:
        return self is not PackagingMode.UNSUPPORTED


def classify_package_type(raw_value: str) -> PackagingMode:
    if raw_value == QUARKUS_VALUE_PACKAGE_NATIVE:
        return PackagingMode.NATIVE
    if QUARKUS_VALUE_PACKAGE_UBERJAR in raw_value:
        return PackagingMode.UBER_JAR
    return PackagingMode.UNSUPPORTED
