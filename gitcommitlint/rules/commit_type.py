"""Commit type rules."""
from typing import ClassVar, List, Optional

from pydantic import Field

from ..models import CommitType, Level, Message, Violation
from .base import Rule


class TypeEmpty(Rule):
    """Header must carry a conventional commit type."""

    NAME: ClassVar[str] = "type-empty"
    LEVEL: ClassVar[Level] = Level.ERROR

    def message(self, message: Message) -> str:
        return "Type is empty, subject must follow format: type(scope): description"

    def validate(self, message: Message) -> Optional[Violation]:
        if not (message.type or "").strip():
            return self.violation(self.message(message))
        return None


class TypeAllowed(Rule):
    """Commit type must be one of ``values``.

    Messages without a type are left to ``type-empty``.
    """

    NAME: ClassVar[str] = "type"
    LEVEL: ClassVar[Level] = Level.ERROR

    values: List[str] = Field(default_factory=lambda: [t.value for t in CommitType])

    def message(self, message: Message) -> str:
        return f"Type '{message.type}' is not allowed. Use one of: {', '.join(self.values)}"

    def validate(self, message: Message) -> Optional[Violation]:
        if message.type and message.type not in self.values:
            return self.violation(self.message(message))
        return None
