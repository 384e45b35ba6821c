"""Fingerprint do ambiente e declaração de inputs/outputs (FingerprintSpec)."""
from .spec import FileSetInput, FingerprintSpec, NormalizationStrategy, OutputDeclaration

__all__ = ["FileSetInput", "FingerprintSpec", "NormalizationStrategy", "OutputDeclaration"]
