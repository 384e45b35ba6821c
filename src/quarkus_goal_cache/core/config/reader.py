# src/quarkus_goal_cache/core/config/reader.py
"""
Leitor canônico do arquivo de configuração do Quarkus.

As instruções de cache assumem que as propriedades do Quarkus estão
declaradas no arquivo de configuração do projeto
(`src/main/resources/application.properties` por padrão). Existem muitas
outras formas de configurar o Quarkus (variáveis, perfis, system
properties); apenas este arquivo é considerado, pois é ele que participa
do fingerprint como input declarado.

Política de leitura (v1):
    - O arquivo é lido e parseado a cada chamada (sem cache entre chamadas)
    - Formato Java properties (`key=value`), parseado por `jproperties`
    - Qualquer falha de I/O ou parse resulta em ausência (`None`)
    - `require` converte ausência em `ConfigurationMissing`

Limites explícitos:
    - Não valida semântica dos valores
    - Não considera o classpath nem perfis do Quarkus
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

from jproperties import ParseError, Properties

from quarkus_goal_cache.core.exceptions import ConfigurationMissing

if TYPE_CHECKING:
    from quarkus_goal_cache.core.decision.context import DecisionContext


# Encoding padrão do formato .properties
PROPERTIES_ENCODING = "iso-8859-1"


class ConfigurationReader:
    """Lookup de chaves únicas no arquivo de configuração do projeto."""

    def __init__(self, ctx: "DecisionContext"):
        self.ctx = ctx

    @property
    def path(self) -> Path:
        return self.ctx.project_dir / self.ctx.configuration_file

    def get(self, key: str) -> Optional[str]:
        """
        Retorna o valor de `key` ou `None` quando ausente.

        Ausência cobre tanto a chave não declarada quanto o arquivo
        inexistente, ilegível ou malformado. String vazia é um valor
        presente e é retornada como tal.
        """
        props = Properties()
        try:
            with self.path.open("rb") as f:
                props.load(f, PROPERTIES_ENCODING)
        except (OSError, ParseError, UnicodeDecodeError) as e:
            self.ctx.log(
                level="warning",
                message="Erro ao ler o arquivo de configuração do Quarkus",
                path=str(self.path),
                error=e.__class__.__name__,
            )
            return None

        entry = props.get(key)
        if entry is None:
            return None
        return entry.data

    def require(self, key: str) -> str:
        """
        Retorna o valor de `key` ou levanta `ConfigurationMissing`.

        Raises:
            ConfigurationMissing: Se a chave estiver ausente.
        """
        value = self.get(key)
        if value is None:
            self.ctx.log(
                level="warning",
                message=f"Defina a propriedade de configuração do Quarkus [{key}] para permitir o cache do goal",
                key=key,
            )
            raise ConfigurationMissing.for_key(key)
        return value
