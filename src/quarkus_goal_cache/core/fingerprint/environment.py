# src/quarkus_goal_cache/core/fingerprint/environment.py
"""
Fingerprint determinístico das variáveis de ambiente do Quarkus.

O Quarkus aceita configuração via variáveis de ambiente (ex.:
`quarkus.profile=prod`), e essas variáveis não aparecem em nenhum input
declarado do goal. Este módulo condensa o subconjunto relevante do
ambiente em uma única string que participa da chave de cache.

Política de hashing (v1):
    - Apenas chaves que começam com o prefixo informado (case-sensitive)
    - Entradas ordenadas por chave (a ordem de enumeração do ambiente
      varia entre plataformas e processos)
    - Cada entrada contribui com `key + value` em UTF-8, em sequência,
      para um único digest SHA-256
    - Resultado codificado em base64 padrão

Invariantes:
    - Mesmas entradas relevantes → mesmo fingerprint, em qualquer ordem
    - Qualquer diferença em chave ou valor relevante altera o fingerprint
    - Nenhuma entrada relevante → digest da entrada vazia (valor estável)

Falhas:
    - Algoritmo indisponível no runtime → `DigestAlgorithmUnavailable`
      (fatal: indica deploy quebrado, não variação normal de build)
"""

from __future__ import annotations

import base64
import hashlib
from typing import Dict, Mapping

from quarkus_goal_cache.core.exceptions import DigestAlgorithmUnavailable
from quarkus_goal_cache.core.platform import EnvironmentProvider


DIGEST_ALGORITHM = "sha256"


def _new_digest(algorithm: str):
    try:
        return hashlib.new(algorithm)
    except ValueError as e:
        raise DigestAlgorithmUnavailable(
            message=f"Unsupported algorithm: {algorithm}",
            details={"algorithm": algorithm},
            hint="Verifique o runtime Python/OpenSSL usado pelo host de build.",
        ) from e


def matching_entries(environ: Mapping[str, str], prefix: str) -> Dict[str, str]:
    """Retorna as entradas cujo nome começa com `prefix`, ordenadas por chave."""
    return {k: environ[k] for k in sorted(environ) if k.startswith(prefix)}


def hash_environment(environ: Mapping[str, str], prefix: str, *, algorithm: str = DIGEST_ALGORITHM) -> str:
    digest = _new_digest(algorithm)
    for key, value in matching_entries(environ, prefix).items():
        digest.update((key + value).encode("utf-8"))
    return base64.b64encode(digest.digest()).decode("ascii")


class EnvironmentFingerprinter:
    """Fingerprint do ambiente lido via provider injetável."""

    def __init__(self, environment: EnvironmentProvider, *, algorithm: str = DIGEST_ALGORITHM):
        self.environment = environment
        self.algorithm = algorithm

    def fingerprint(self, prefix: str) -> str:
        return hash_environment(self.environment.environ(), prefix, algorithm=self.algorithm)
