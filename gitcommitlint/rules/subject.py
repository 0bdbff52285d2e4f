"""Subject line rules."""
from typing import ClassVar, Optional

from ..models import Level, Message, Violation
from .base import Rule


class SubjectEmpty(Rule):
    """Subject line must not be blank."""

    NAME: ClassVar[str] = "subject-empty"
    LEVEL: ClassVar[Level] = Level.ERROR

    def message(self, message: Message) -> str:
        return "Subject is empty"

    def validate(self, message: Message) -> Optional[Violation]:
        if not (message.subject or "").strip():
            return self.violation(self.message(message))
        return None


class SubjectMaxLength(Rule):
    """Subject line must not exceed ``length`` characters."""

    NAME: ClassVar[str] = "subject-max-length"
    LEVEL: ClassVar[Level] = Level.ERROR

    length: int = 72

    def message(self, message: Message) -> str:
        subject = message.subject or ""
        return f"Subject line too long ({len(subject)} > {self.length})"

    def validate(self, message: Message) -> Optional[Violation]:
        if len(message.subject or "") > self.length:
            return self.violation(self.message(message))
        return None


class SubjectFullStop(Rule):
    """Subject line must not end with a period."""

    NAME: ClassVar[str] = "subject-full-stop"
    LEVEL: ClassVar[Level] = Level.ERROR

    def message(self, message: Message) -> str:
        return "Subject line should not end with a period"

    def validate(self, message: Message) -> Optional[Violation]:
        if (message.subject or "").rstrip().endswith("."):
            return self.violation(self.message(message))
        return None
