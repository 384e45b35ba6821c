# src/quarkus_goal_cache/__init__.py
"""
Quarkus Goal Cache: decisão de cache para o goal de build do Quarkus.

Este pacote decide, para cada execução do goal `build` do plugin Maven do
Quarkus, se o resultado é cacheável com segurança e, em caso positivo,
declara exatamente os inputs e outputs que definem a chave de cache.

O empacotamento nativo/uber-jar depende de influências externas (modo de
container build, variáveis de ambiente, SO) invisíveis ao grafo de
dependências do host. Sem modelá-las, o cache poderia servir um artefato
nativo para um build JVM, ou um artefato gerado com outro ambiente.

Arquitetura em alto nível:
    - core.config      → settings da extensão e leitura do application.properties
    - core.packaging   → classificação do modo e validação de container build
    - core.fingerprint → fingerprint do ambiente e FingerprintSpec
    - core.decision    → contexto, tipos e orquestrador da decisão
    - host             → adapter para a API de build cache do host

Limites explícitos:
    - Não armazena nem recupera artefatos
    - Não calcula hash de conteúdo de arquivos (responsabilidade do host)
"""
from .core.decision.context import DecisionContext
from .core.decision.orchestrator import CacheDecisionOrchestrator, decide
from .core.decision.types import CacheDecision, DecisionStatus
from .core.packaging.mode import PackagingMode
from .host.adapter import QuarkusCachingConfig

__all__ = [
    "CacheDecision",
    "CacheDecisionOrchestrator",
    "DecisionContext",
    "DecisionStatus",
    "PackagingMode",
    "QuarkusCachingConfig",
    "decide",
]
