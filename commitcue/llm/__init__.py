"""LLM provider module for commitcue.

The providers here back the in-process model capabilities registered in
commitcue.backends.builtins.
"""

from dotenv import load_dotenv

from commitcue.llm.base import (
    API_KEY_ENV_VARS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODELS,
    DEFAULT_TEMPERATURE,
    BaseLLMProvider,
    LLMProvider,
    LLMResult,
)
from commitcue.llm.exceptions import LLMError, MissingAPIKeyError

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider,
    model: str | None = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use.
        model: The model to use. Defaults to the provider's default model.
        max_tokens: Maximum tokens in the response.
        temperature: Sampling temperature.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    if provider == LLMProvider.ANTHROPIC:
        from commitcue.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model, max_tokens=max_tokens, temperature=temperature)

    elif provider == LLMProvider.OPENAI:
        from commitcue.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model, max_tokens=max_tokens, temperature=temperature)

    elif provider == LLMProvider.GOOGLE:
        from commitcue.llm.google_provider import GoogleProvider

        return GoogleProvider(model=model, max_tokens=max_tokens, temperature=temperature)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "API_KEY_ENV_VARS",
    "DEFAULT_MODELS",
    "BaseLLMProvider",
    "LLMError",
    "LLMProvider",
    "LLMResult",
    "MissingAPIKeyError",
    "get_provider",
]
