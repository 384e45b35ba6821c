# tests/core/config/test_merge.py
"""
Testes da política de deep-merge de settings.

Os testes asseguram que:
- valores escalares são sobrescritos
- dicionários são mesclados de forma recursiva
- listas são sobrescritas integralmente
- conflitos de tipo são rejeitados explicitamente
- objetos de entrada não são mutados
"""

import pytest

try:
    from quarkus_goal_cache.core.config.merge import deep_merge
    from quarkus_goal_cache.core.config.errors import SettingsTypeConflictError
except Exception as e:  # noqa: BLE001
    deep_merge = None
    SettingsTypeConflictError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings merge modules. Implement:\n"
            "- src/quarkus_goal_cache/core/config/merge.py (deep_merge)\n"
            "- src/quarkus_goal_cache/core/config/errors.py (SettingsTypeConflictError)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_merge_simple_override():
    _require_imports()
    out = deep_merge({"execution_id": "build", "plugin_id": "p"}, {"execution_id": "native"})
    assert out == {"execution_id": "native", "plugin_id": "p"}


def test_merge_nested_dict():
    _require_imports()
    base = {"host": {"plugin": "quarkus-maven-plugin", "execution": "build"}}
    override = {"host": {"execution": "native"}}
    assert deep_merge(base, override) == {"host": {"plugin": "quarkus-maven-plugin", "execution": "native"}}


def test_merge_list_override_total():
    _require_imports()
    out = deep_merge({"ignored": ["project", "session"]}, {"ignored": ["repos"]})
    assert out["ignored"] == ["repos"]


def test_merge_does_not_mutate_inputs():
    _require_imports()
    base = {"host": {"plugin": "a"}}
    override = {"host": {"plugin": "b"}}
    deep_merge(base, override)
    assert base == {"host": {"plugin": "a"}}
    assert override == {"host": {"plugin": "b"}}


def test_merge_type_conflict_raises():
    _require_imports()
    with pytest.raises(SettingsTypeConflictError):
        deep_merge({"plugin_id": "quarkus-maven-plugin"}, {"plugin_id": 42})


def test_merge_conflict_reports_full_key_path():
    _require_imports()
    with pytest.raises(SettingsTypeConflictError) as excinfo:
        deep_merge({"host": {"plugin": "a"}}, {"host": {"plugin": {"name": "b"}}})
    assert "host.plugin" in str(excinfo.value)


def test_merge_none_keeps_base_value():
    _require_imports()
    out = deep_merge({"execution_id": "build", "plugin_id": "p"}, {"execution_id": None})
    assert out == {"execution_id": "build", "plugin_id": "p"}
