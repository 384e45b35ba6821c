# src/quarkus_goal_cache/core/config/__init__.py

"""
Camada de configuração da decisão de cache.

Responsabilidades do pacote:
    - Settings da extensão (defaults embutidos + overrides locais via deep-merge)
    - Leitura de chaves do arquivo de configuração do Quarkus do projeto

Invariantes:
    - Settings resolvidos são um dicionário puro (dict)
    - Ausência de chave no application.properties é um estado, não um erro fatal
"""
