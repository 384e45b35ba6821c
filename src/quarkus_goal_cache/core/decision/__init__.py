# src/quarkus_goal_cache/core/decision/__init__.py
"""
Decisão de cache: contexto por execução, tipos de resultado e orquestrador.
"""
