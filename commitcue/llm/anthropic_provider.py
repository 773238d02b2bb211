"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

from commitcue.llm.base import (
    SYSTEM_PROMPT,
    BaseLLMProvider,
    LLMProvider,
    LLMResult,
)
from commitcue.llm.exceptions import LLMError, MissingAPIKeyError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    provider = LLMProvider.ANTHROPIC

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message using Anthropic Claude.

        Args:
            prompt: The full prompt text.

        Returns:
            An LLMResult containing the response text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        try:
            client = Anthropic(api_key=api_key)
            message = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )

            raw_response = "".join(
                block.text for block in message.content if getattr(block, "type", None) == "text"
            )
            input_tokens = message.usage.input_tokens
            output_tokens = message.usage.output_tokens

        except MissingAPIKeyError:
            raise
        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}")

        return LLMResult(
            text=self._require_text(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
