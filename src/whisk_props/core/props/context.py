# src/whisk_props/core/props/context.py
"""
Contexto de uma resolução de propriedades.

Este módulo define o `ResolutionContext`, a estrutura usada pelo resolver
para registrar, de forma estruturada, o que aconteceu em cada leitura:
arquivos carregados ou ausentes, soft misses, decisões de merge e o
resultado da validação.

Princípios fundamentais:
    - Logs são eventos estruturados, não texto livre
    - Warnings são sinais não fatais e não interrompem a resolução
    - Segredos nunca entram em eventos (usa-se o fingerprint)

Invariantes:
    - Eventos sempre incluem `resolution_id` e `source`
    - Warnings são agrupados por `source`

Limites explícitos:
    - Não lê fontes
    - Não persiste eventos
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class ResolutionContext:
    """
    Agregador de eventos e warnings de uma ou mais resoluções.

    Um resolver possui exatamente um contexto; o chamador pode injetar o
    seu para inspecionar os eventos depois.

    Invariantes:
        - eventos acumulam enquanto o resolver for reutilizado
        - `clear()` descarta eventos e warnings e inicia um novo `resolution_id`
    """
    resolution_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "resolution_id": self.resolution_id,
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, source: str, message: str) -> None:
        if source not in self.warnings:
            self.warnings[source] = []
        self.warnings[source].append(message)
        self.log(source=source, level="WARNING", message=message)

    def clear(self) -> None:
        self.events.clear()
        self.warnings.clear()
        self.resolution_id = uuid.uuid4().hex
        self.created_at = datetime.now(timezone.utc)

    def events_for(self, source: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["source"] == source]
