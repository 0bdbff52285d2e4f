"""Base rule class for commit message policies.

Every policy check is a small immutable pydantic model holding its own
options. The engine only relies on the interface defined here, so new
rules can be added without touching the engine.
"""

from abc import ABC, abstractmethod
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from ..models import Level, Message, Violation


class Rule(BaseModel, ABC):
    """Abstract base class for commit message rules.

    Attributes:
        NAME (str): Stable identifier used in configuration and reports
        LEVEL (Level): Severity used when no ``level`` override is configured
        level (Optional[Level]): Configured severity override
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    NAME: ClassVar[str]
    LEVEL: ClassVar[Level] = Level.ERROR

    level: Optional[Level] = None

    def resolve_level(self) -> Level:
        """Return the configured level, falling back to the rule default."""
        return self.level if self.level is not None else self.LEVEL

    def violation(self, text: str, level: Optional[Level] = None) -> Violation:
        """Build a violation attributed to this rule."""
        return Violation(level=level or self.resolve_level(), message=text, rule=self.NAME)

    @abstractmethod
    def message(self, message: Message) -> str:
        """Describe a generic failure of this rule for the given message.

        Args:
            message: The commit message being checked

        Returns:
            str: Human readable description
        """
        pass

    @abstractmethod
    def validate(self, message: Message) -> Optional[Violation]:
        """Check the message against this rule.

        Args:
            message: The commit message being checked

        Returns:
            Optional[Violation]: None if the message satisfies the rule
        """
        pass
