"""Scope rules."""
from typing import ClassVar, Optional

from ..models import Level, Message, Violation
from .base import Rule


class ScopeEmpty(Rule):
    """Header must carry a scope."""

    NAME: ClassVar[str] = "scope-empty"
    LEVEL: ClassVar[Level] = Level.WARNING

    def message(self, message: Message) -> str:
        return "Scope is empty"

    def validate(self, message: Message) -> Optional[Violation]:
        if not (message.scope or "").strip():
            return self.violation(self.message(message))
        return None
