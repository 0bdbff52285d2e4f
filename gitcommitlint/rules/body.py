"""Body rules."""
from typing import ClassVar, Optional

from ..models import Level, Message, Violation
from .base import Rule


class BodyEmpty(Rule):
    """Message must have a body explaining the change."""

    NAME: ClassVar[str] = "body-empty"
    LEVEL: ClassVar[Level] = Level.WARNING

    def message(self, message: Message) -> str:
        return "Body is empty"

    def validate(self, message: Message) -> Optional[Violation]:
        if not (message.body or "").strip():
            return self.violation(self.message(message))
        return None


class BodyMaxLineLength(Rule):
    """Every body line must fit within ``length`` characters."""

    NAME: ClassVar[str] = "body-max-line-length"
    LEVEL: ClassVar[Level] = Level.ERROR

    length: int = 100

    def message(self, message: Message) -> str:
        return f"Body line is longer than {self.length} characters"

    def validate(self, message: Message) -> Optional[Violation]:
        long_lines = [
            (number, line)
            for number, line in enumerate((message.body or "").splitlines(), start=1)
            if len(line) > self.length
        ]
        if not long_lines:
            return None
        # One violation per message, pointing at the first offender
        number, line = long_lines[0]
        text = f"Body line {number} too long ({len(line)} > {self.length})"
        if len(long_lines) > 1:
            text += f" and {len(long_lines) - 1} more"
        return self.violation(text)


class BodyLeadingBlank(Rule):
    """A blank line must separate the subject from the body."""

    NAME: ClassVar[str] = "body-leading-blank"
    LEVEL: ClassVar[Level] = Level.WARNING

    def message(self, message: Message) -> str:
        return "Leave one blank line after subject"

    def validate(self, message: Message) -> Optional[Violation]:
        lines = message.raw.splitlines()
        if len(lines) > 1 and lines[1].strip() != "":
            return self.violation(self.message(message))
        return None
