"""Modo de empacotamento do Quarkus e validação de container build."""
