"""Core functionality for git-commit-lint."""
from typing import Iterable, List, Optional

from .config import Config
from .models import LintResult, Message, Violation
from .observers import LintObserver
from .parser import parse_message
from .rules import Rule


def _run_rule(rule: Rule, message: Message) -> Optional[Violation]:
    """Run one rule, turning an unexpected failure into a violation of that rule."""
    try:
        return rule.validate(message)
    except Exception as e:
        return rule.violation(f"Rule {rule.NAME} failed to run: {e}")


def evaluate(message: Message, rules: Iterable[Rule], fail_fast: bool = False) -> List[Violation]:
    """Run every rule against the message and collect their violations.

    Violations keep the order of ``rules``. Rules that pass contribute
    nothing. With ``fail_fast`` only the first violation is returned.
    """
    violations: List[Violation] = []
    for rule in rules:
        violation = _run_rule(rule, message)
        if violation is None:
            continue
        violations.append(violation)
        if fail_fast:
            break
    return violations


class CommitLinter:
    """Lints commit messages with an ordered set of configured rules."""

    def __init__(self, rules: Iterable[Rule], fail_fast: bool = False):
        """Initialize the linter.

        Args:
            rules: Configured rule instances, in evaluation order
            fail_fast: Stop at the first violation
        """
        self.rules: List[Rule] = list(rules)
        self.fail_fast = fail_fast
        self.observers: List[LintObserver] = []

    @classmethod
    def from_config(cls, config: Config) -> "CommitLinter":
        return cls(config.rules.build(), fail_fast=config.fail_fast)

    def add_observer(self, observer: LintObserver) -> None:
        """Add an observer to be notified of lint results."""
        self.observers.append(observer)

    def remove_observer(self, observer: LintObserver) -> None:
        self.observers.remove(observer)

    def lint(self, message: Message) -> LintResult:
        """Lint a parsed message and notify observers."""
        result = LintResult(violations=evaluate(message, self.rules, fail_fast=self.fail_fast))
        for observer in self.observers:
            for violation in result.violations:
                observer.on_violation(violation)
            observer.on_lint_completed(result)
        return result

    def lint_text(self, raw: str) -> LintResult:
        """Parse raw commit text and lint it.

        Raises:
            ValueError: If the message is empty
        """
        return self.lint(parse_message(raw))
