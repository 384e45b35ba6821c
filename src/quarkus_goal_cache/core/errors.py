"""
Quarkus Goal Cache: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros anexados às decisões
`NotCacheable`. Uma decisão recusada sempre carrega, além do motivo
textual, um payload:

- explícito
- serializável
- acionável (hint indica onde corrigir)

Nenhuma recusa de cache é silenciosa.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DecisionErrorPayload:
    """
    Payload canônico de erro de uma decisão de cache.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIGURATION_MISSING = "CONFIGURATION_MISSING"
UNSUPPORTED_PACKAGE_TYPE = "UNSUPPORTED_PACKAGE_TYPE"
NON_REPRODUCIBLE_NATIVE_BUILD = "NON_REPRODUCIBLE_NATIVE_BUILD"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def configuration_missing(
    *,
    key: str,
    configuration_file: Optional[str] = None,
    hint: Optional[str] = None,
) -> DecisionErrorPayload:
    return DecisionErrorPayload(
        type=CONFIGURATION_MISSING,
        message=f"Property [{key}] is not set",
        details={
            "key": key,
            "configuration_file": configuration_file,
        },
        hint=hint or f"Defina a propriedade [{key}] no arquivo de configuração do Quarkus.",
    )


def unsupported_package_type(
    *,
    package_type: Optional[str],
    hint: str = "Use quarkus.package.type=native (com container build) ou uber-jar para habilitar o cache.",
) -> DecisionErrorPayload:
    return DecisionErrorPayload(
        type=UNSUPPORTED_PACKAGE_TYPE,
        message="unsupported package type",
        details={"package_type": package_type},
        hint=hint,
    )


def non_reproducible_native_build(
    *,
    container_build: Optional[str] = None,
    builder_image: Optional[str] = None,
    hint: str = (
        "Habilite quarkus.native.container-build=true e fixe quarkus.native.builder-image "
        "para obter um build nativo estável."
    ),
) -> DecisionErrorPayload:
    return DecisionErrorPayload(
        type=NON_REPRODUCIBLE_NATIVE_BUILD,
        message="non-container native build",
        details={
            "container_build": container_build,
            "builder_image": builder_image,
        },
        hint=hint,
    )
