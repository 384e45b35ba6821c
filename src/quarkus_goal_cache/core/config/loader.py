# src/quarkus_goal_cache/core/config/loader.py
"""
Loader canônico dos settings da extensão de cache do Quarkus.

Os settings definem *onde* e *para quem* a decisão de cache é tomada:
    - plugin_id: plugin do host cujo goal é avaliado
    - execution_id: execution id aceito (apenas "build" por padrão)
    - configuration_file: caminho do application.properties relativo ao projeto
    - environment_prefix: prefixo das variáveis de ambiente que entram no fingerprint

Os settings são resolvidos a partir de:
    - defaults embutidos (obrigatórios, sempre presentes)
    - um arquivo local de overrides em YAML ou JSON (opcional)
    - um dict de overrides do host (opcional, parcial)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz os mesmos settings

Limites explícitos:
    - Não lê o application.properties (ver `reader.py`)
    - Não interage com o orquestrador ou com o host
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    InvalidSettingsRootTypeError,
    InvalidSettingsValueError,
    SettingsNotFoundError,
    UnsupportedSettingsFormatError,
)


QUARKUS_PLUGIN_ID = "quarkus-maven-plugin"
QUARKUS_EXECUTION_ID = "build"
QUARKUS_CONFIGURATION_FILE = "src/main/resources/application.properties"
QUARKUS_ENVIRONMENT_PREFIX = "quarkus."

DEFAULT_SETTINGS: Dict[str, Any] = {
    "plugin_id": QUARKUS_PLUGIN_ID,
    "execution_id": QUARKUS_EXECUTION_ID,
    "configuration_file": QUARKUS_CONFIGURATION_FILE,
    "environment_prefix": QUARKUS_ENVIRONMENT_PREFIX,
}

_REQUIRED_STRING_KEYS = ("plugin_id", "execution_id", "configuration_file", "environment_prefix")


def default_settings() -> Dict[str, Any]:
    """Retorna uma cópia independente dos settings embutidos."""
    return deepcopy(DEFAULT_SETTINGS)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Decisões arquiteturais:
        - O arquivo deve existir no momento do carregamento
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios
        - Formatos não suportados geram erro explícito

    Args:
        path (Path): Caminho para o arquivo de settings.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        SettingsNotFoundError: Se o arquivo não existir.
        UnsupportedSettingsFormatError: Se o formato do arquivo não for suportado.
        InvalidSettingsRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SettingsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedSettingsFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidSettingsRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def _validate(settings: Dict[str, Any]) -> Dict[str, Any]:
    for key in _REQUIRED_STRING_KEYS:
        value = settings.get(key)
        if not isinstance(value, str) or not value:
            raise InvalidSettingsValueError(
                f"settings.{key} deve ser uma string não vazia, recebido: {value!r}"
            )
    return settings


def load_settings(
    *,
    local_path: Optional[str] = None,
    required: bool = False,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve os settings efetivos da extensão.

    Política de resolução:
        - Os defaults embutidos são sempre a base
        - O arquivo local é opcional; quando ausente no disco é ignorado,
          exceto se `required=True`
        - Quando presente, o local sempre tem prioridade sobre defaults
        - `overrides` (dict passado pelo host) tem prioridade sobre ambos;
          pode ser parcial
        - A resolução utiliza `deep_merge` com política determinística

    Args:
        local_path (Optional[str]): Caminho opcional para overrides locais.
        required (bool): Exige que `local_path` exista no disco.
        overrides (Optional[Dict[str, Any]]): Overrides programáticos, parciais.

    Returns:
        Dict[str, Any]: Settings finais resolvidos.

    Raises:
        SettingsNotFoundError: Se `required=True` e o arquivo local não existir.
        UnsupportedSettingsFormatError: Se o formato do arquivo não for suportado.
        InvalidSettingsRootTypeError: Se o conteúdo não for um dicionário.
        InvalidSettingsValueError: Se uma chave canônica tiver valor inválido.
        SettingsTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = default_settings()

    if local_path is not None:
        local_file = Path(local_path)
        if required or local_file.exists():
            local = _load_file(local_file)
            effective = deep_merge(effective, local)

    if overrides is not None:
        if not isinstance(overrides, dict):
            raise InvalidSettingsRootTypeError(
                f"Overrides devem ser dict, recebido: {type(overrides).__name__}"
            )
        effective = deep_merge(effective, overrides)

    return _validate(effective)
