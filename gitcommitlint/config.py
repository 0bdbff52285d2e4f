"""Configuration management for git-commit-lint."""
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import tomli
import tomli_w
import os
import re

from .rules import (
    BodyEmpty,
    BodyLeadingBlank,
    BodyMaxLineLength,
    DescriptionEmpty,
    Rule,
    ScopeEmpty,
    SubjectEmpty,
    SubjectFullStop,
    SubjectMaxLength,
    TicketId,
    TypeAllowed,
    TypeEmpty,
)

DEFAULT_CONFIG_FILENAME = ".gitcommitlint.toml"

class RulesConfig(BaseModel):
    """Per-rule settings, keyed by rule name.

    In the config file a table enables a rule with the given options,
    ``true`` enables it with defaults and ``false`` disables it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    subject_empty: Optional[SubjectEmpty] = Field(default_factory=SubjectEmpty, alias=SubjectEmpty.NAME)
    subject_max_length: Optional[SubjectMaxLength] = Field(default_factory=SubjectMaxLength, alias=SubjectMaxLength.NAME)
    subject_full_stop: Optional[SubjectFullStop] = Field(default=None, alias=SubjectFullStop.NAME)
    type_empty: Optional[TypeEmpty] = Field(default_factory=TypeEmpty, alias=TypeEmpty.NAME)
    type_allowed: Optional[TypeAllowed] = Field(default=None, alias=TypeAllowed.NAME)
    scope_empty: Optional[ScopeEmpty] = Field(default=None, alias=ScopeEmpty.NAME)
    description_empty: Optional[DescriptionEmpty] = Field(default_factory=DescriptionEmpty, alias=DescriptionEmpty.NAME)
    body_empty: Optional[BodyEmpty] = Field(default=None, alias=BodyEmpty.NAME)
    body_leading_blank: Optional[BodyLeadingBlank] = Field(default=None, alias=BodyLeadingBlank.NAME)
    body_max_line_length: Optional[BodyMaxLineLength] = Field(default_factory=BodyMaxLineLength, alias=BodyMaxLineLength.NAME)
    ticket_id: Optional[TicketId] = Field(default_factory=TicketId, alias=TicketId.NAME)

    @field_validator("*", mode="before")
    @classmethod
    def _toggle(cls, value: Any) -> Any:
        if value is True:
            return {}
        if value is False:
            return None
        return value

    def build(self) -> List[Rule]:
        """Return the enabled rules in evaluation order."""
        return [getattr(self, name) for name in type(self).model_fields if getattr(self, name) is not None]

    def to_toml_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            rule = getattr(self, name)
            data[field.alias] = False if rule is None else rule.model_dump(mode="json", exclude_none=True)
        return data

class Config(BaseModel):
    """Configuration settings for git-commit-lint.

    This class defines all configurable options that can be set either
    via the config file or command line arguments.
    """

    fail_fast: bool = Field(
        default=False,
        description="Stop at the first violation instead of collecting all of them"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    log_directory: Optional[str] = Field(
        default=None,
        description="Directory for automatically generated log files"
    )

    rules: RulesConfig = Field(
        default_factory=RulesConfig,
        description="Rule toggles and options"
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Sanitize string values to prevent injection attacks."""
        if not value:
            return value

        # Remove control characters and null bytes
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        # Remove command injection patterns and split on them
        value = re.split(r'[;&|`$()]', value)[0]

        # Limit length
        if len(value) > 1000:
            value = value[:1000]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            for key in ['log_file', 'log_directory']:
                if key in config_data and isinstance(config_data[key], str):
                    config_data[key] = cls._sanitize_string(config_data[key])

            if config_data.get('log_file') and not cls._is_safe_path(config_data['log_file']):
                print(f"Warning: Unsafe log file path '{config_data['log_file']}', using default")
                config_data['log_file'] = None

            return cls(**config_data)
        except (OSError, tomli.TOMLDecodeError, ValidationError) as e:
            # If there's any error reading the config, use defaults
            print(f"Warning: Error reading config file: {e}")
            return cls()

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        config_dict: Dict[str, Any] = {
            k: v for k, v in self.model_dump(exclude={'rules'}).items() if v is not None
        }
        if config_dict.get('log_file') and not self._is_safe_path(config_dict['log_file']):
            print(f"Warning: Unsafe log file path '{config_dict['log_file']}', not saving")
            del config_dict['log_file']
        config_dict['rules'] = self.rules.to_toml_dict()

        try:
            with config_path.open('wb') as f:
                tomli_w.dump(config_dict, f)
        except OSError as e:
            print(f"Error saving config file: {e}")

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name inside
        log_directory. Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            directory = Path(".")
            if self.log_directory:
                if self._is_safe_path(self.log_directory):
                    directory = Path(self.log_directory)
                else:
                    print(f"Warning: Unsafe log directory '{self.log_directory}', using repository root")
            return directory / f"gcl_log-{timestamp}.log"
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            else:
                print(f"Warning: Unsafe log file path '{self.log_file}', using default")
                return None
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support and sanitization."""
        env_data = {}

        env_mapping = {
            'GIT_COMMIT_LINT_FAIL_FAST': 'fail_fast',
            'GIT_COMMIT_LINT_ALWAYS_LOG': 'always_log',
            'GIT_COMMIT_LINT_LOG_FILE': 'log_file',
            'GIT_COMMIT_LINT_LOG_DIRECTORY': 'log_directory',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                if field_name in ['log_file', 'log_directory']:
                    value = self._sanitize_string(value)

                if field_name in ['fail_fast', 'always_log']:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
