"""Structured diagnostic events reported to an injected observer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class DiagnosticEvent:
    source: str  # dotted name of the reporting function
    message: str
    category: str = "stringHelper"
    params: dict[str, Any] = field(default_factory=dict)


Observer = Callable[[DiagnosticEvent], None]


class CollectingObserver:
    """Observer that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[DiagnosticEvent] = []

    def __call__(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()
