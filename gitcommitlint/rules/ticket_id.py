"""Ticket ID rule."""
import re
from typing import ClassVar, List, Optional

from ..models import Level, Message, Violation
from .base import Rule

TICKET_ID_PATTERN = r"#[A-Z]+-\d+"

MISSING_MESSAGE = (
    "Ticket ID is missing in either subject or body of commit message! "
    "It should be on last line if inside body, or at the end of subject!"
)


def _body_lines(body: str) -> List[str]:
    """Split on newlines only, dropping a trailing empty line and one carriage return per line."""
    lines = body.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class TicketId(Rule):
    """Requires a ticket reference such as ``#BOS-494`` in the subject or body."""

    NAME: ClassVar[str] = "ticket-id"
    LEVEL: ClassVar[Level] = Level.ERROR

    level: Optional[Level] = Level.ERROR
    # Reject more than one occurrence
    unique: bool = False
    # Ticket may appear in the subject
    subject: bool = True
    # Ticket may appear anywhere in the body
    body: bool = True
    # Ticket inside the body must be on its last line
    body_last_line: bool = True
    pattern: str = TICKET_ID_PATTERN

    def message(self, message: Message) -> str:
        return MISSING_MESSAGE

    def validate(self, message: Message) -> Optional[Violation]:
        level = self.resolve_level()
        try:
            regex = re.compile(self.pattern)
        except re.error as e:
            return self.violation(f"Invalid regex {self.pattern}: {e}", level)

        match_count = 0
        subject_has_ticket = False
        last_line_has_ticket = False

        if self.subject and regex.search(message.subject or ""):
            match_count += 1
            subject_has_ticket = True

        body = message.body or ""
        if self.body:
            lines = _body_lines(body)
            last_line = lines[-1] if lines else None
            for line in lines:
                if regex.search(line):
                    match_count += 1
                    if self.body_last_line and line == last_line:
                        last_line_has_ticket = True

        if match_count == 0 and (self.subject or self.body):
            return self.violation(self.message(message), level)

        if self.unique and match_count > 1:
            if last_line_has_ticket:
                return self.violation("Ticket ID is duplicated in body of commit message!", level)
            return self.violation(
                "Ticket ID is duplicated in either subject or body of commit message!", level
            )

        if (
            self.body_last_line
            and not last_line_has_ticket
            and match_count >= 1
            and body
            and not subject_has_ticket
        ):
            return self.violation("Ticket ID should be on last line in body!", level)

        return None
