"""Configuration for commitcue.

The effective configuration is the built-in DEFAULT_CONFIG with the user's
override file (~/.commitcue/config.yaml or config.json) applied on top.
Overrides replace whole top-level keys; lists are never merged.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

# A command specification: executable or built-in name, then literal arguments
CommandSpec = tuple[str, ...]


class ConfigError(Exception):
    """Raised when the configuration is malformed."""

    pass


DEFAULT_PROMPT_RULES = """Write a git commit message for the staged changes below.

Rules:
- First line: imperative mood summary, at most 72 characters, no trailing period.
- Leave one blank line after the summary.
- Body: short bullet points describing what changed and why.
- Only describe changes shown in the diff. Do not invent changes.
- Match the conventions used in [RECENT_COMMITS] where they are consistent.
- Output ONLY the commit message. No markdown fences. No commentary."""


# ============================================================
# DEFAULT VALUES
# ============================================================
# Every option has a default, so a merged config is always complete

DEFAULT_CONFIG: dict[str, Any] = {
    "commit_with_template": True,
    "copy_prompt": False,
    "copy_result": False,
    "interactive_prompt_limit": 139000,
    "query_language_model": True,
    "report_unavailable_models": False,
    "report_unavailable_filters": False,
    "model_preferences": [
        ["anthropic"],
        ["openai"],
        ["google"],
        ["ollama", "run", "llama3.2"],
    ],
    "result_filters": [
        ["strip-fences"],
        ["trim"],
    ],
    "recent_commit_count": 10,
    "max_diff_chars": 100000,
    "diff_exclude": [
        "poetry.lock",
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "Cargo.lock",
        "Gemfile.lock",
        "composer.lock",
        "go.sum",
        "*.min.js",
        "*.min.css",
    ],
    "prompt_rules": DEFAULT_PROMPT_RULES,
    "max_tokens": 1500,
    "temperature": 0.3,
}


def _validate_command_list(key: str, value: Any) -> list[CommandSpec]:
    """Validate an "array of arrays" command list into command specifications.

    Args:
        key: The option name, used in error messages.
        value: The raw configuration value.

    Returns:
        A list of immutable command specifications.

    Raises:
        ValueError: If the value is not a list of non-empty string lists.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a list of commands, got {type(value).__name__}")

    commands = []
    for index, entry in enumerate(value):
        if not isinstance(entry, (list, tuple)):
            raise ValueError(
                f"{key}[{index}] must be a list of strings, got {json.dumps(entry)}"
            )
        if not entry:
            raise ValueError(f"{key}[{index}] must not be empty")
        if not all(isinstance(token, str) for token in entry):
            raise ValueError(f"{key}[{index}] must contain only strings: {json.dumps(entry)}")
        if not entry[0]:
            raise ValueError(f"{key}[{index}] has an empty command name")
        commands.append(tuple(entry))
    return commands


class CommitCueConfig(BaseModel):
    """Validated configuration snapshot.

    Read-only for the duration of a run; components receive it as an
    explicit argument.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    commit_with_template: bool
    copy_prompt: bool
    copy_result: bool
    interactive_prompt_limit: int
    query_language_model: bool
    report_unavailable_models: bool
    report_unavailable_filters: bool
    model_preferences: list[CommandSpec]
    result_filters: list[CommandSpec]
    recent_commit_count: int
    max_diff_chars: int
    diff_exclude: list[str]
    prompt_rules: str
    max_tokens: int
    temperature: float

    @field_validator("model_preferences", mode="before")
    @classmethod
    def model_preferences_must_be_commands(cls, v: Any) -> list[CommandSpec]:
        """Ensure model_preferences is a list of non-empty string lists."""
        return _validate_command_list("model_preferences", v)

    @field_validator("result_filters", mode="before")
    @classmethod
    def result_filters_must_be_commands(cls, v: Any) -> list[CommandSpec]:
        """Ensure result_filters is a list of non-empty string lists."""
        return _validate_command_list("result_filters", v)

    @field_validator("interactive_prompt_limit", "recent_commit_count", "max_diff_chars")
    @classmethod
    def limits_must_not_be_negative(cls, v: int) -> int:
        """Ensure numeric limits are not negative."""
        if v < 0:
            raise ValueError("must not be negative")
        return v


def merge_config(overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
    """Apply user overrides on top of the defaults.

    Args:
        overrides: Top-level options from the user configuration file.

    Returns:
        A new dictionary with every option present.
    """
    merged = dict(DEFAULT_CONFIG)
    if overrides:
        merged.update(overrides)
    return merged


def build_config(overrides: Optional[dict[str, Any]] = None) -> CommitCueConfig:
    """Merge and validate a configuration snapshot.

    Args:
        overrides: Top-level options from the user configuration file.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If any option is malformed.
    """
    try:
        return CommitCueConfig(**merge_config(overrides))
    except ValidationError as e:
        problems = []
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            problems.append(f"  {location}: {error['msg']}")
        raise ConfigError("Invalid configuration:\n" + "\n".join(problems)) from e


def load_config(config_file=None) -> CommitCueConfig:
    """Load the effective configuration.

    Args:
        config_file: Explicit user configuration file. Defaults to the file
            located by global_config.find_config_file().

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file cannot be read or any option is malformed.
    """
    # Import here to avoid circular dependency
    from commitcue import global_config

    overrides = global_config.load_user_config(config_file)
    return build_config(overrides)


def dump_config(config: CommitCueConfig) -> str:
    """Render a configuration snapshot as JSON."""
    return json.dumps(config.model_dump(mode="json"), indent=2)
