# tests/core/fingerprint/test_environment_fingerprint.py
"""
Testes do fingerprint determinístico do ambiente.

Os testes asseguram que:
- a ordem de enumeração do ambiente não afeta o fingerprint
- qualquer diferença em chave/valor relevante altera o fingerprint
- variáveis fora do prefixo são ignoradas
- ambiente sem entradas relevantes produz o digest da entrada vazia
- o algoritmo corresponde a base64(SHA-256(concatenação ordenada))
- algoritmo indisponível é falha fatal tipada
"""

import base64
import hashlib

import pytest

try:
    from quarkus_goal_cache.core.exceptions import DigestAlgorithmUnavailable
    from quarkus_goal_cache.core.fingerprint.environment import (
        EnvironmentFingerprinter,
        hash_environment,
        matching_entries,
    )
    from quarkus_goal_cache.core.platform import StaticEnvironment
except Exception as e:  # noqa: BLE001
    EnvironmentFingerprinter = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None

EMPTY_SHA256_B64 = "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing environment fingerprint module. Implement:\n"
            "- src/quarkus_goal_cache/core/fingerprint/environment.py (EnvironmentFingerprinter)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def _fp(env):
    return EnvironmentFingerprinter(StaticEnvironment(env)).fingerprint("quarkus.")


def test_fingerprint_is_order_independent():
    _require_imports()
    e1 = {"quarkus.profile": "dev", "quarkus.http.port": "8080", "PATH": "/bin"}
    e2 = {"PATH": "/bin", "quarkus.http.port": "8080", "quarkus.profile": "dev"}
    assert list(e1) != list(e2)
    assert _fp(e1) == _fp(e2)


def test_fingerprint_changes_with_value():
    _require_imports()
    assert _fp({"quarkus.profile": "dev"}) != _fp({"quarkus.profile": "prod"})


def test_fingerprint_changes_with_key():
    _require_imports()
    assert _fp({"quarkus.profile": "dev"}) != _fp({"quarkus.profiles": "dev"})


def test_non_matching_entries_are_ignored():
    _require_imports()
    base = {"quarkus.profile": "dev"}
    noisy = {"quarkus.profile": "dev", "HOME": "/root", "QUARKUS_PROFILE": "prod"}
    assert _fp(base) == _fp(noisy)


def test_no_matching_entries_yields_empty_digest():
    _require_imports()
    assert _fp({}) == EMPTY_SHA256_B64
    assert _fp({"HOME": "/root"}) == EMPTY_SHA256_B64


def test_matches_sha256_of_sorted_concatenation():
    _require_imports()
    env = {"quarkus.z": "1", "quarkus.a": "2"}
    expected = base64.b64encode(hashlib.sha256(b"quarkus.a2quarkus.z1").digest()).decode("ascii")
    assert _fp(env) == expected
    assert hash_environment(env, "quarkus.") == expected


def test_matching_entries_are_sorted():
    _require_imports()
    out = matching_entries({"quarkus.z": "1", "x": "0", "quarkus.a": "2"}, "quarkus.")
    assert list(out) == ["quarkus.a", "quarkus.z"]


def test_unavailable_algorithm_raises():
    _require_imports()
    fingerprinter = EnvironmentFingerprinter(StaticEnvironment({}), algorithm="no-such-digest")
    with pytest.raises(DigestAlgorithmUnavailable):
        fingerprinter.fingerprint("quarkus.")
