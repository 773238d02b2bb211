"""Google Gemini provider implementation."""

from google import genai
from google.genai import types

from commitcue.llm.base import (
    SYSTEM_PROMPT,
    BaseLLMProvider,
    LLMProvider,
    LLMResult,
)
from commitcue.llm.exceptions import LLMError, MissingAPIKeyError

# Models whose internal "thinking" consumes the output token budget
THINKING_MODELS = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-2.0-flash-thinking",
]

THINKING_TOKEN_MULTIPLIER = 3


class GoogleProvider(BaseLLMProvider):
    """Google Gemini LLM provider."""

    provider = LLMProvider.GOOGLE

    def _is_thinking_model(self) -> bool:
        """Check if the model spends output tokens on internal thinking."""
        return any(self.model.startswith(name) for name in THINKING_MODELS)

    def generate(self, prompt: str) -> LLMResult:
        """Generate a commit message using Google Gemini.

        Args:
            prompt: The full prompt text.

        Returns:
            An LLMResult containing the response text and token usage.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For other LLM-related errors.
        """
        api_key = self.get_api_key()

        full_prompt = f"{SYSTEM_PROMPT}\n\n{prompt}"

        max_output_tokens = self.max_tokens
        if self._is_thinking_model():
            max_output_tokens = self.max_tokens * THINKING_TOKEN_MULTIPLIER

        try:
            client = genai.Client(api_key=api_key)
            response = client.models.generate_content(
                model=self.model,
                contents=full_prompt,
                config=types.GenerateContentConfig(
                    max_output_tokens=max_output_tokens,
                    temperature=self.temperature,
                ),
            )

            if not response.candidates:
                raise LLMError("Google Gemini returned no candidates in response")

            candidate = response.candidates[0]
            finish_reason = str(getattr(candidate, "finish_reason", ""))
            if "SAFETY" in finish_reason:
                raise LLMError(f"Google Gemini blocked response due to safety filters: {finish_reason}")
            if "MAX_TOKENS" in finish_reason:
                raise LLMError("Google Gemini response was truncated. Try the short prompt mode.")

            raw_response = response.text

            input_tokens = 0
            output_tokens = 0
            usage = getattr(response, "usage_metadata", None)
            if usage:
                input_tokens = getattr(usage, "prompt_token_count", 0) or 0
                output_tokens = getattr(usage, "candidates_token_count", 0) or 0

        except (MissingAPIKeyError, LLMError):
            raise
        except Exception as e:
            raise LLMError(f"Google Gemini API call failed: {e}")

        return LLMResult(
            text=self._require_text(raw_response),
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
