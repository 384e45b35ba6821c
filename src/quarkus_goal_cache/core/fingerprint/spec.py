# src/quarkus_goal_cache/core/fingerprint/spec.py
"""
Tipos canônicos do FingerprintSpec.

O FingerprintSpec é a saída declarativa do core: descreve exatamente o que
participa da chave de cache de um goal e quais artefatos ele produz. Todos
os conceitos da API do host (file sets, normalização de caminho, lista de
campos ignorados, outputs) são representados como dados simples, para que
qualquer adapter de host possa traduzi-los em suas próprias chamadas.

Componentes principais:
    - NormalizationStrategy → enum de normalização de caminhos de um file set
    - FileSetInput          → file set declarado como input
    - OutputDeclaration     → artefato declarado como output
    - FingerprintSpec       → agregado imutável entregue ao host

Invariantes:
    - Todos os tipos são imutáveis (frozen)
    - A ordem de declaração é preservada (tuplas)
    - O spec é construído a cada execução e nunca persistido pelo core
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class NormalizationStrategy(str, Enum):
    """
    Estratégia de normalização de caminhos aplicada pelo host antes do hash.

    Estados definidos:
        - DEFAULT: estratégia padrão do host
        - RELATIVE_PATH: caminho relativizado, permitindo hits de cache entre
          checkouts em diretórios absolutos diferentes
    """
    DEFAULT = "default"
    RELATIVE_PATH = "relative_path"


@dataclass(frozen=True)
class FileSetInput:
    """
    File set declarado como input do goal.

    Campos:
        - name: nome lógico do input (nome do campo do goal no host)
        - root: diretório raiz relativo ao projeto; `None` usa o valor que o
          host já associa ao campo `name`
        - includes: padrões de inclusão; vazio = conteúdo recursivo completo
        - normalization: estratégia de normalização de caminhos
    """
    name: str
    root: Optional[str] = None
    includes: Tuple[str, ...] = ()
    normalization: NormalizationStrategy = NormalizationStrategy.DEFAULT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "root": self.root,
            "includes": list(self.includes),
            "normalization": self.normalization.value,
        }


@dataclass(frozen=True)
class OutputDeclaration:
    """Artefato produzido pelo goal (nome lógico, padrão de caminho, justificativa)."""
    name: str
    path: str
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "path": self.path, "reason": self.reason}


@dataclass(frozen=True)
class FingerprintSpec:
    """
    Declaração completa de inputs e outputs de um goal cacheável.

    Campos:
        - file_sets: file sets declarados, em ordem
        - properties: nomes de propriedades escalares do goal cujos valores
          atuais participam da chave
        - computed_properties: propriedades calculadas (fingerprint do
          ambiente, nome/versão/arquitetura do SO)
        - ignored: campos que o host trataria como input mas que não afetam
          o output (identidades voláteis de objetos)
        - outputs: artefatos declarados
    """
    file_sets: Tuple[FileSetInput, ...]
    properties: Tuple[str, ...]
    computed_properties: Mapping[str, str]
    ignored: Tuple[str, ...]
    outputs: Tuple[OutputDeclaration, ...] = field(default_factory=tuple)

    def computed(self, name: str) -> str:
        return self.computed_properties[name]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_sets": [fs.to_dict() for fs in self.file_sets],
            "properties": list(self.properties),
            "computed_properties": dict(self.computed_properties),
            "ignored": list(self.ignored),
            "outputs": [o.to_dict() for o in self.outputs],
        }
