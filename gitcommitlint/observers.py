"""Observer pattern for lint runs."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .models import Level, LintResult, Violation


class LintObserver(ABC):
    """Abstract base class for lint observers."""

    @abstractmethod
    def on_violation(self, violation: Violation) -> None:
        """Called for every violation, in rule order."""
        pass

    @abstractmethod
    def on_lint_completed(self, result: LintResult) -> None:
        """Called once all rules have run."""
        pass


class ConsoleLogObserver(LintObserver):
    """Observer that reports violations to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_violation(self, violation: Violation) -> None:
        color = "red" if violation.level == Level.ERROR else "yellow"
        rule = f" ({violation.rule})" if violation.rule else ""
        self.console.print(
            f"[{color}]{violation.level.value}{rule}: {escape(violation.message)}[/{color}]",
            highlight=False,
        )

    def on_lint_completed(self, result: LintResult) -> None:
        if result.passed:
            if result.warnings:
                self.console.print(
                    f"[yellow]Commit message passed with {len(result.warnings)} warning(s)[/yellow]"
                )
            else:
                self.console.print("[green]Commit message passed all checks[/green]")
        else:
            self.console.print(
                f"[red]Commit message failed with {len(result.errors)} error(s) "
                f"and {len(result.warnings)} warning(s)[/red]"
            )


class FileLogObserver(LintObserver):
    """Observer that logs lint results to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_violation(self, violation: Violation) -> None:
        self._log(f"{violation.level.value.upper()} {violation.rule or '-'}: {violation.message}")

    def on_lint_completed(self, result: LintResult) -> None:
        status = "Passed" if result.passed else "Failed"
        summary = f"{status} lint with {len(result.errors)} error(s) and {len(result.warnings)} warning(s)"
        if result.max_level is not None:
            summary += f", highest level: {result.max_level.value}"
        self._log(summary)
