# tests/conftest.py
"""
Fixtures compartilhados para testes do Quarkus Goal Cache.

Este módulo define fixtures reutilizáveis que fornecem:
- um diretório de projeto temporário com application.properties controlado
- providers estáticos de ambiente e plataforma
- fábrica de DecisionContext isolado por teste

O objetivo destas fixtures é permitir testes do core sem depender de:
- variáveis de ambiente reais do processo
- plataforma real do host
- diretório de trabalho corrente

Invariantes:
    - Nenhuma fixture lê `os.environ` ou o módulo `platform`
    - Todo I/O acontece dentro de `tmp_path`
    - Todas as fixtures são seguras para execução em paralelo
"""

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest


# =====================================================
# Projeto (application.properties)
# =====================================================

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """
    Diretório raiz de um projeto Quarkus fictício.

    Apenas a estrutura `src/main/resources` é criada; o arquivo de
    configuração é escrito por `write_properties`.
    """
    (tmp_path / "src" / "main" / "resources").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_properties(project_dir: Path) -> Callable[..., Path]:
    """
    Fábrica que escreve o application.properties do projeto fictício.

    Aceita um dict (serializado em `key=value` por linha) ou o conteúdo
    bruto do arquivo, para cenários de arquivo malformado.

    Returns:
        Callable[..., Path]: função que escreve e retorna o caminho do arquivo.
    """

    def _write(entries: Optional[Dict[str, str]] = None, *, raw: Optional[str] = None) -> Path:
        path = project_dir / "src" / "main" / "resources" / "application.properties"
        if raw is None:
            raw = "".join(f"{k}={v}\n" for k, v in (entries or {}).items())
        path.write_text(raw, encoding="utf-8")
        return path

    return _write


# =====================================================
# Providers & contexto
# =====================================================

@pytest.fixture
def static_platform():
    from quarkus_goal_cache.core.platform import StaticPlatform

    return StaticPlatform(name="Linux", version="6.1.0-test", arch="amd64")


@pytest.fixture
def make_context(project_dir: Path, static_platform) -> Callable[..., object]:
    """
    Fábrica de DecisionContext isolado.

    O ambiente padrão é vazio; cada teste declara explicitamente as
    variáveis relevantes via `env`.
    """
    from quarkus_goal_cache.core.decision.context import DecisionContext
    from quarkus_goal_cache.core.platform import StaticEnvironment

    def _make(env: Optional[Dict[str, str]] = None, **overrides):
        kwargs = {
            "project_dir": project_dir,
            "environment": StaticEnvironment(dict(env or {})),
            "platform": static_platform,
        }
        kwargs.update(overrides)
        return DecisionContext(**kwargs)

    return _make


@pytest.fixture
def local_settings_yaml() -> str:
    """YAML de override local dos settings da extensão."""
    return """\
execution_id: native-build
environment_prefix: "QUARKUS_"
"""
