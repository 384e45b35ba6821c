# src/quarkus_goal_cache/core/config/errors.py
"""
Exceções canônicas da camada de settings da extensão de cache.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, validação estrutural e resolução dos settings da extensão
(plugin alvo, execution id, arquivo de configuração do Quarkus, prefixo de
variáveis de ambiente).

As exceções aqui definidas representam **falhas estruturais do setup da
extensão**, e não condições normais de uma execução de goal. Por isso
são fatais e nunca convertidas em decisão `NotCacheable`.

Invariantes:
    - Todas as exceções de settings herdam de `SettingsError`
    - Nenhuma exceção representa ausência de chave no application.properties
      (isso é `ConfigurationMissing`, recuperável, em `core.exceptions`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do orquestrador nem do adapter de host
"""


class SettingsError(Exception):
    """
    Exceção base para erros relacionados aos settings da extensão.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e merge de settings devem herdar desta classe.
    """


class SettingsNotFoundError(SettingsError):
    """
    Exceção levantada quando um arquivo de settings explicitamente exigido
    não é encontrado no caminho especificado.
    """


class UnsupportedSettingsFormatError(SettingsError):
    """
    Exceção levantada quando o formato do arquivo de settings não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidSettingsRootTypeError(SettingsError):
    """
    Exceção levantada quando o conteúdo raiz dos settings não é um `dict`.
    """


class InvalidSettingsValueError(SettingsError):
    """
    Exceção levantada quando uma chave canônica dos settings resolvidos
    não é uma string não vazia.
    """


class SettingsTypeConflictError(SettingsError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"plugin_id": "quarkus-maven-plugin"}
        - override: {"plugin_id": {"name": "x"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
