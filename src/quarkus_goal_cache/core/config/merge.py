# src/quarkus_goal_cache/core/config/merge.py
"""
Utilitário canônico de deep-merge de settings.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - `None` no override → mantém o valor base (chave "não informada")
    - escalar → sobrescrita direta, desde que o tipo seja o mesmo
    - conflito de tipos → `SettingsTypeConflictError` com o caminho completo
      da chave (ex.: `host.plugin_id`)

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado durante o processo
    - Chaves não sobrescritas são preservadas
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import SettingsTypeConflictError


def _conflict(path: Tuple[str, ...], base: Any, override: Any) -> SettingsTypeConflictError:
    return SettingsTypeConflictError(
        f"Conflito de tipo em '{'.'.join(path) or '<raiz>'}': "
        f"{type(base).__name__} vs {type(override).__name__}"
    )


def _merge_value(path: Tuple[str, ...], base: Any, override: Any) -> Any:
    if override is None:
        return deepcopy(base)
    if isinstance(base, dict):
        if not isinstance(override, dict):
            raise _conflict(path, base, override)
        merged = deepcopy(base)
        for key, value in override.items():
            merged[key] = _merge_value(path + (str(key),), base[key], value) if key in base else deepcopy(value)
        return merged
    if isinstance(override, list) or base is None:
        return deepcopy(override)
    if type(base) is not type(override):
        raise _conflict(path, base, override)
    return deepcopy(override)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre settings base e overrides.

    Args:
        base (Dict[str, Any]): Settings base (defaults embutidos).
        override (Dict[str, Any]): Overrides explícitos (arquivo local ou dict do host).

    Returns:
        Dict[str, Any]: Novo dicionário resultante do deep-merge.

    Raises:
        SettingsTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise _conflict((), base, override)
    return _merge_value((), base, override)
