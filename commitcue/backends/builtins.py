"""Built-in capabilities.

Model capabilities:
- anthropic, openai, google: in-process SDK calls, configured when the
  provider's API key is available
- ollama: external command, configured when the ollama daemon answers

Filter capabilities:
- strip-fences: remove a Markdown code fence around the whole text
- trim: strip surrounding blank lines and trailing whitespace on each line
"""

import subprocess
from typing import Optional

from commitcue.backends.exceptions import CapabilityError
from commitcue.backends.registry import Capability, CapabilityRegistry, Runner
from commitcue.config import CommitCueConfig
from commitcue.llm import (
    API_KEY_ENV_VARS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    LLMError,
    LLMProvider,
    get_provider,
)
from commitcue.llm.base import find_api_key


def strip_code_fences(text: str) -> str:
    """Remove a Markdown code fence wrapping the whole text.

    Args:
        text: Model output, possibly fenced as ```lang ... ```.

    Returns:
        The text inside the fence, or the text unchanged if not fenced.
    """
    cleaned = text.strip()
    if not cleaned.startswith("```"):
        return text

    lines = cleaned.split("\n")
    # Drop the opening fence line (``` or ```lang)
    lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def trim_whitespace(text: str) -> str:
    """Strip trailing whitespace per line and surrounding blank lines."""
    lines = [line.rstrip() for line in text.splitlines()]
    return "\n".join(lines).strip("\n")


def _filter_runner(transform) -> Runner:
    def run(args: list[str], text: str) -> str:
        if args:
            raise CapabilityError(f"takes no arguments, got {' '.join(args)}")
        return transform(text)

    return run


def _provider_runner(provider: LLMProvider, max_tokens: int, temperature: float) -> Runner:
    def run(args: list[str], prompt: str) -> str:
        if len(args) > 1:
            raise CapabilityError(f"expects at most one argument (the model), got {' '.join(args)}")
        model = args[0] if args else None
        try:
            result = get_provider(
                provider,
                model=model,
                max_tokens=max_tokens,
                temperature=temperature,
            ).generate(prompt)
        except LLMError as e:
            raise CapabilityError(str(e)) from e
        return result.text

    return run


def _provider_configured(provider: LLMProvider):
    def is_configured() -> bool:
        return bool(find_api_key(API_KEY_ENV_VARS[provider]))

    return is_configured


def ollama_is_running() -> bool:
    """Check that the ollama daemon answers."""
    try:
        result = subprocess.run(
            ["ollama", "list"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def default_registry(config: Optional[CommitCueConfig] = None) -> CapabilityRegistry:
    """Build the registry of built-in capabilities.

    Args:
        config: Supplies max_tokens and temperature for the SDK capabilities.

    Returns:
        A new registry; callers may register more capabilities on it.
    """
    max_tokens = config.max_tokens if config else DEFAULT_MAX_TOKENS
    temperature = config.temperature if config else DEFAULT_TEMPERATURE

    registry = CapabilityRegistry()

    for provider in LLMProvider:
        registry.register(
            Capability(
                name=provider.value,
                is_configured=_provider_configured(provider),
                runner=_provider_runner(provider, max_tokens, temperature),
                hint=f"set {API_KEY_ENV_VARS[provider]}",
            )
        )

    registry.register(
        Capability(
            name="ollama",
            is_configured=ollama_is_running,
            hint="start the daemon with 'ollama serve'",
        )
    )

    registry.register(Capability(name="strip-fences", runner=_filter_runner(strip_code_fences)))
    registry.register(Capability(name="trim", runner=_filter_runner(trim_whitespace)))

    return registry
