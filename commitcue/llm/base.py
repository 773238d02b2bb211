"""Base classes and shared utilities for the in-process LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from commitcue.llm.exceptions import LLMError, MissingAPIKeyError


class LLMProvider(Enum):
    """LLM providers available as built-in capabilities."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"
    GOOGLE = "google"


DEFAULT_MODELS = {
    LLMProvider.ANTHROPIC: "claude-sonnet-4-5",
    LLMProvider.OPENAI: "gpt-4o-mini",
    LLMProvider.GOOGLE: "gemini-2.0-flash",
}

API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
    LLMProvider.GOOGLE: "GOOGLE_API_KEY",
}

DEFAULT_MAX_TOKENS = 1500
DEFAULT_TEMPERATURE = 0.3

# System prompt shared across all providers
SYSTEM_PROMPT = """You are an expert software engineer writing git commit messages.
Be precise: only describe changes actually shown in the diff.
Reply with the commit message text only."""


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int
    output_tokens: int


def find_api_key(env_var_name: str) -> Optional[str]:
    """Look up an API key in the environment, then the credentials file.

    Args:
        env_var_name: Environment variable name to check.

    Returns:
        The API key, or None if it is not set anywhere.
    """
    api_key = os.getenv(env_var_name)
    if api_key:
        return api_key

    from commitcue.global_config import get_credential

    return get_credential(env_var_name)


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    provider: LLMProvider

    def __init__(
        self,
        model: str | None = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        """Initialize the provider.

        Args:
            model: The model to use. Defaults to the provider's default model.
            max_tokens: Maximum tokens in the response.
            temperature: Sampling temperature.
        """
        self.model = model or DEFAULT_MODELS[self.provider]
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.api_key_env_var = API_KEY_ENV_VARS[self.provider]

    def is_configured(self) -> bool:
        """Check whether an API key is available for this provider."""
        return bool(find_api_key(self.api_key_env_var))

    def get_api_key(self) -> str:
        """Get the API key from the environment or credentials file.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
        """
        api_key = find_api_key(self.api_key_env_var)
        if not api_key:
            raise MissingAPIKeyError(
                f"{self.api_key_env_var} is not set. Export it or add "
                f"{self.api_key_env_var}=<key> to ~/.commitcue/credentials"
            )
        return api_key

    @abstractmethod
    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message for the prompt.

        Args:
            prompt: The full prompt text.

        Returns:
            An LLMResult with the response text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For API failures or empty responses.
        """
        pass

    def _require_text(self, text: Optional[str]) -> str:
        """Reject empty responses."""
        if not text or not text.strip():
            raise LLMError(f"{self.provider.value} returned an empty response")
        return text
