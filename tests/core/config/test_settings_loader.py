# tests/core/config/test_settings_loader.py
"""
Testes do carregador de settings da extensão (load_settings).

Os testes asseguram que:
- os defaults embutidos são sempre a base
- o arquivo local é opcional (exceto quando `required=True`)
- overrides locais têm precedência e são mesclados via deep-merge
- formatos e estruturas inválidas são rejeitados explicitamente

Limites explícitos:
    - Não valida leitura do application.properties
    - Não valida integração com o orquestrador
"""

from pathlib import Path

import pytest

try:
    from quarkus_goal_cache.core.config.loader import DEFAULT_SETTINGS, load_settings
    from quarkus_goal_cache.core.config.errors import (
        InvalidSettingsRootTypeError,
        InvalidSettingsValueError,
        SettingsNotFoundError,
        SettingsTypeConflictError,
        UnsupportedSettingsFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_settings = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing settings loader/errors modules. Implement:\n"
            "- src/quarkus_goal_cache/core/config/loader.py (load_settings)\n"
            "- src/quarkus_goal_cache/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_defaults_only():
    """
    Sem arquivo local, os settings resolvidos são exatamente os defaults.

    Invariantes:
        - plugin `quarkus-maven-plugin`, execution `build`
        - prefixo de ambiente `quarkus.`
    """
    _require_imports()
    out = load_settings()
    assert out == DEFAULT_SETTINGS
    assert out["plugin_id"] == "quarkus-maven-plugin"
    assert out["execution_id"] == "build"
    assert out["configuration_file"] == "src/main/resources/application.properties"
    assert out["environment_prefix"] == "quarkus."


def test_defaults_are_not_mutated_by_caller():
    _require_imports()
    out = load_settings()
    out["plugin_id"] = "changed"
    assert DEFAULT_SETTINGS["plugin_id"] == "quarkus-maven-plugin"


def test_missing_local_is_ok(tmp_path: Path):
    _require_imports()
    out = load_settings(local_path=str(tmp_path / "missing.yaml"))
    assert out == DEFAULT_SETTINGS


def test_missing_required_local_raises(tmp_path: Path):
    _require_imports()
    with pytest.raises(SettingsNotFoundError):
        load_settings(local_path=str(tmp_path / "missing.yaml"), required=True)


def test_local_yaml_overrides_defaults(tmp_path: Path, local_settings_yaml):
    """
    Verifica que overrides locais têm precedência sobre os defaults.

    Chaves não sobrescritas permanecem com o valor embutido.
    """
    _require_imports()
    local = tmp_path / "settings.local.yaml"
    local.write_text(local_settings_yaml, encoding="utf-8")

    out = load_settings(local_path=str(local))
    assert out["execution_id"] == "native-build"
    assert out["environment_prefix"] == "QUARKUS_"
    assert out["plugin_id"] == "quarkus-maven-plugin"


def test_local_json_is_supported(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.json"
    local.write_text('{"configuration_file": "config/application.properties"}', encoding="utf-8")

    out = load_settings(local_path=str(local))
    assert out["configuration_file"] == "config/application.properties"


def test_empty_local_file_keeps_defaults(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.yaml"
    local.write_text("", encoding="utf-8")
    assert load_settings(local_path=str(local)) == DEFAULT_SETTINGS


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.yaml"
    local.write_text("- just\n- a\n- list\n", encoding="utf-8")
    with pytest.raises(InvalidSettingsRootTypeError):
        load_settings(local_path=str(local))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.toml"
    local.write_text('plugin_id = "x"\n', encoding="utf-8")
    with pytest.raises(UnsupportedSettingsFormatError):
        load_settings(local_path=str(local))


def test_empty_value_is_rejected(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.yaml"
    local.write_text('environment_prefix: ""\n', encoding="utf-8")
    with pytest.raises(InvalidSettingsValueError):
        load_settings(local_path=str(local))


def test_type_conflict_raises(tmp_path: Path):
    _require_imports()
    local = tmp_path / "settings.yaml"
    local.write_text("plugin_id:\n  name: other\n", encoding="utf-8")
    with pytest.raises(SettingsTypeConflictError):
        load_settings(local_path=str(local))


def test_partial_overrides_are_merged_with_defaults():
    _require_imports()
    out = load_settings(overrides={"execution_id": "native-build"})
    assert out["execution_id"] == "native-build"
    assert out["plugin_id"] == "quarkus-maven-plugin"
    assert out["configuration_file"] == "src/main/resources/application.properties"


def test_overrides_take_precedence_over_local_file(tmp_path: Path, local_settings_yaml: str):
    _require_imports()
    local = tmp_path / "settings.yaml"
    local.write_text(local_settings_yaml, encoding="utf-8")
    out = load_settings(local_path=str(local), overrides={"execution_id": "build"})
    assert out["execution_id"] == "build"
    assert out["environment_prefix"] == "QUARKUS_"


def test_invalid_overrides_are_rejected():
    _require_imports()
    with pytest.raises(InvalidSettingsValueError):
        load_settings(overrides={"plugin_id": ""})
    with pytest.raises(InvalidSettingsRootTypeError):
        load_settings(overrides=["plugin_id"])
