"""Description rules."""
from typing import ClassVar, Optional

from ..models import Level, Message, Violation
from .base import Rule


class DescriptionEmpty(Rule):
    """Header must carry a description after the type."""

    NAME: ClassVar[str] = "description-empty"
    LEVEL: ClassVar[Level] = Level.WARNING

    def message(self, message: Message) -> str:
        return "Description is empty"

    def validate(self, message: Message) -> Optional[Violation]:
        if not (message.description or "").strip():
            return self.violation(self.message(message))
        return None
