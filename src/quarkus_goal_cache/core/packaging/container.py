# src/quarkus_goal_cache/core/packaging/container.py
"""
Validação de reprodutibilidade do build nativo.

Artefatos nativos só são reprodutíveis bit a bit (e portanto seguros para
cache) quando a compilação roda dentro de uma imagem de container fixada.
Um build nativo direto no host depende do toolchain local, que não é
controlado, e nunca deve ser cacheado.

Regra (v1):
    reproduzível  ⇔  quarkus.native.container-build == true
                  ∧  quarkus.native.builder-image presente e não vazio

Falha fechada: chave obrigatória ausente → não reproduzível.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from quarkus_goal_cache.core.config.reader import ConfigurationReader
from quarkus_goal_cache.core.exceptions import ConfigurationMissing


QUARKUS_KEY_NATIVE_CONTAINER_BUILD = "quarkus.native.container-build"
QUARKUS_KEY_NATIVE_BUILDER_IMAGE = "quarkus.native.builder-image"


def parse_boolean(value: Optional[str]) -> bool:
    """Apenas "true" (qualquer caixa) é verdadeiro."""
    return value is not None and value.lower() == "true"


@dataclass(frozen=True)
class ContainerBuildCheck:
    """Valores lidos durante a validação; reutilizados no payload da recusa."""

    container_build: Optional[str]
    builder_image: Optional[str]
    missing_keys: Tuple[str, ...] = ()

    @property
    def is_reproducible(self) -> bool:
        if self.missing_keys:
            return False
        return parse_boolean(self.container_build) and bool(self.builder_image)


class ContainerBuildValidator:
    """Decide se um build nativo roda em container com builder image fixada."""

    def __init__(self, reader: ConfigurationReader):
        self.reader = reader

    def _require(self, key: str, missing: list) -> Optional[str]:
        try:
            return self.reader.require(key)
        except ConfigurationMissing as e:
            missing.append(e.key)
            return None

    def inspect(self) -> ContainerBuildCheck:
        """Lê cada chave obrigatória uma única vez."""
        missing: list = []
        check = ContainerBuildCheck(
            container_build=self._require(QUARKUS_KEY_NATIVE_CONTAINER_BUILD, missing),
            builder_image=self._require(QUARKUS_KEY_NATIVE_BUILDER_IMAGE, missing),
            missing_keys=tuple(missing),
        )
        if check.missing_keys:
            self.reader.ctx.log(
                level="info",
                message="Build nativo considerado não reproduzível",
                missing_keys=list(check.missing_keys),
            )
        return check

    def is_reproducible(self) -> bool:
        return self.inspect().is_reproducible
