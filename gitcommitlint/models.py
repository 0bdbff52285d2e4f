"""Shared models for git-commit-lint."""
from typing import Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class CommitType(str, Enum):
    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    BUILD = "build"
    CI = "ci"
    CHORE = "chore"
    REVERT = "revert"

class Level(str, Enum):
    """Severity of a violation, ordered by rank rather than by value."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self.rank >= other.rank

_LEVEL_RANKS = {Level.WARNING: 1, Level.ERROR: 2}

class Message(BaseModel):
    """Parsed representation of one commit message."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(min_length=1, description="Full original commit text")
    subject: Optional[str] = None
    body: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    scope: Optional[str] = None
    footers: Optional[Dict[str, str]] = None

class Violation(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: Level
    message: str
    rule: Optional[str] = Field(default=None, description="Name of the rule that produced it")

class LintResult(BaseModel):
    """Aggregated outcome of running every configured rule on one message."""

    model_config = ConfigDict(frozen=True)

    violations: List[Violation] = Field(default_factory=list)

    @property
    def errors(self) -> List[Violation]:
        return [v for v in self.violations if v.level == Level.ERROR]

    @property
    def warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.level == Level.WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def passed(self) -> bool:
        return not self.has_errors

    @property
    def max_level(self) -> Optional[Level]:
        if not self.violations:
            return None
        return max(v.level for v in self.violations)

    @property
    def exit_code(self) -> int:
        return 1 if self.has_errors else 0
