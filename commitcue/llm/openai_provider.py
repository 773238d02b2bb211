"""OpenAI GPT provider implementation."""

from openai import OpenAI

from commitcue.llm.base import (
    SYSTEM_PROMPT,
    BaseLLMProvider,
    LLMProvider,
    LLMResult,
)
from commitcue.llm.exceptions import LLMError, MissingAPIKeyError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI GPT LLM provider."""

    provider = LLMProvider.OPENAI

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message using OpenAI GPT.

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
            client = OpenAI(api_key=api_key)
            response = client.chat.completions.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )

            raw_response = response.choices[0].message.content
            input_tokens = response.usage.prompt_tokens
            output_tokens = response.usage.completion_tokens

        except MissingAPIKeyError:
            raise
        except Exception as e:
            raise LLMError(f"OpenAI API call failed: {e}")

        return LLMResult(
            text=self._require_text(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
