# src/quarkus_goal_cache/core/__init__.py
"""
Core da decisão de cache.

Este pacote contém a implementação canônica e independente de host da
decisão de cache: leitura de configuração, classificação do modo de
empacotamento, validação de reprodutibilidade, fingerprint do ambiente,
construção do FingerprintSpec e orquestração da decisão.

Invariantes:
    - Nenhum componente mantém estado entre decisões
    - Ambiente e plataforma são acessados apenas via providers injetáveis
    - Condições de configuração do projeto nunca escapam como exceção
"""
