from .adapter import (
    QuarkusCachingConfig,
    apply_decision,
    apply_inputs,
    apply_outputs,
)

__all__ = [
    "QuarkusCachingConfig",
    "apply_decision",
    "apply_inputs",
    "apply_outputs",
]
