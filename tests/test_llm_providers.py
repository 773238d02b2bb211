"""Tests for LLM provider modules."""

import os
from unittest.mock import MagicMock, patch

import pytest

from commitcue.llm import (
    DEFAULT_MODELS,
    LLMError,
    LLMProvider,
    MissingAPIKeyError,
    get_provider,
)


class TestGetProvider:
    """Tests for get_provider factory function."""

    def test_returns_anthropic_provider(self):
        """Test getting Anthropic provider."""
        from commitcue.llm.anthropic_provider import AnthropicProvider

        assert isinstance(get_provider(LLMProvider.ANTHROPIC), AnthropicProvider)

    def test_returns_openai_provider(self):
        """Test getting OpenAI provider."""
        from commitcue.llm.openai_provider import OpenAIProvider

        assert isinstance(get_provider(LLMProvider.OPENAI), OpenAIProvider)

    def test_returns_google_provider(self):
        """Test getting Google provider."""
        from commitcue.llm.google_provider import GoogleProvider

        assert isinstance(get_provider(LLMProvider.GOOGLE), GoogleProvider)

    def test_default_model(self):
        """Test that each provider falls back to its default model."""
        for provider in LLMProvider:
            assert get_provider(provider).model == DEFAULT_MODELS[provider]

    def test_custom_settings(self):
        """Test provider with custom model and sampling settings."""
        provider = get_provider(LLMProvider.OPENAI, model="gpt-4.1", max_tokens=200, temperature=0.9)

        assert provider.model == "gpt-4.1"
        assert provider.max_tokens == 200
        assert provider.temperature == 0.9

    def test_unsupported_provider_raises_error(self):
        """Test that unsupported provider raises ValueError."""
        with pytest.raises(ValueError) as exc_info:
            get_provider("invalid_provider")
        assert "Unsupported provider" in str(exc_info.value)


class TestApiKeys:
    """Tests for API key lookup."""

    def test_missing_api_key_raises_error(self):
        """Test that missing API key raises error."""
        provider = get_provider(LLMProvider.ANTHROPIC)

        with patch.dict(os.environ, {}, clear=True):
            with patch("commitcue.global_config.get_credential", return_value=None):
                with pytest.raises(MissingAPIKeyError) as exc_info:
                    provider.get_api_key()

                assert "ANTHROPIC_API_KEY" in str(exc_info.value)
                assert provider.is_configured() is False

    def test_gets_api_key_from_env(self):
        """Test getting API key from environment."""
        provider = get_provider(LLMProvider.GOOGLE)

        with patch.dict(os.environ, {"GOOGLE_API_KEY": "test-key"}):
            assert provider.get_api_key() == "test-key"
            assert provider.is_configured() is True


class TestAnthropicProvider:
    """Tests for AnthropicProvider.generate."""

    def test_generate_returns_text(self, mocker):
        """Test that text blocks are joined into the result."""
        mock_client = MagicMock()
        text_block = MagicMock(type="text", text="feat: add parser")
        mock_client.messages.create.return_value = MagicMock(
            content=[text_block],
            usage=MagicMock(input_tokens=120, output_tokens=8),
        )
        mocker.patch("commitcue.llm.anthropic_provider.Anthropic", return_value=mock_client)

        provider = get_provider(LLMProvider.ANTHROPIC, model="claude-test")
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "k"}):
            result = provider.generate("prompt")

        assert result.text == "feat: add parser"
        assert result.model == "claude-test"
        assert result.input_tokens == 120
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    def test_api_failure_raises_llm_error(self, mocker):
        """Test that SDK exceptions become LLMError."""
        mock_client = MagicMock()
        mock_client.messages.create.side_effect = RuntimeError("boom")
        mocker.patch("commitcue.llm.anthropic_provider.Anthropic", return_value=mock_client)

        provider = get_provider(LLMProvider.ANTHROPIC)
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "k"}):
            with pytest.raises(LLMError) as exc_info:
                provider.generate("prompt")

        assert "boom" in str(exc_info.value)


    def test_client_construction_failure_raises_llm_error(self, mocker):
        """Test that an error building the SDK client becomes LLMError."""
        mocker.patch(
            "commitcue.llm.anthropic_provider.Anthropic",
            side_effect=ValueError("invalid base_url"),
        )

        provider = get_provider(LLMProvider.ANTHROPIC)
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "k"}):
            with pytest.raises(LLMError) as exc_info:
                provider.generate("prompt")

        assert "invalid base_url" in str(exc_info.value)


class TestOpenAIProvider:
    """Tests for OpenAIProvider.generate."""

    def test_empty_response_raises(self, mocker):
        """Test that an empty completion is an error."""
        mock_client = MagicMock()
        response = MagicMock()
        response.choices[0].message.content = "   "
        mock_client.chat.completions.create.return_value = response
        mocker.patch("commitcue.llm.openai_provider.OpenAI", return_value=mock_client)

        provider = get_provider(LLMProvider.OPENAI)
        with patch.dict(os.environ, {"OPENAI_API_KEY": "k"}):
            with pytest.raises(LLMError) as exc_info:
                provider.generate("prompt")

        assert "empty" in str(exc_info.value)

    def test_generate_returns_text(self, mocker):
        """Test a successful completion."""
        mock_client = MagicMock()
        response = MagicMock()
        response.choices[0].message.content = "fix: handle empty diff"
        response.usage.prompt_tokens = 50
        response.usage.completion_tokens = 6
        mock_client.chat.completions.create.return_value = response
        mocker.patch("commitcue.llm.openai_provider.OpenAI", return_value=mock_client)

        provider = get_provider(LLMProvider.OPENAI)
        with patch.dict(os.environ, {"OPENAI_API_KEY": "k"}):
            result = provider.generate("prompt")

        assert result.text == "fix: handle empty diff"
        assert result.output_tokens == 6


class TestGoogleProvider:
    """Tests for GoogleProvider."""

    def test_is_thinking_model(self):
        """Test thinking model detection."""
        assert get_provider(LLMProvider.GOOGLE, model="gemini-2.5-flash")._is_thinking_model()
        assert not get_provider(LLMProvider.GOOGLE, model="gemini-2.0-flash")._is_thinking_model()

    def test_safety_block_raises(self, mocker):
        """Test that a safety-blocked response is an error."""
        mock_client = MagicMock()
        candidate = MagicMock(finish_reason="FinishReason.SAFETY")
        mock_client.models.generate_content.return_value = MagicMock(candidates=[candidate])
        mocker.patch("commitcue.llm.google_provider.genai.Client", return_value=mock_client)

        provider = get_provider(LLMProvider.GOOGLE)
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "k"}):
            with pytest.raises(LLMError) as exc_info:
                provider.generate("prompt")

        assert "safety" in str(exc_info.value)

    def test_client_construction_failure_raises_llm_error(self, mocker):
        """Test that an error building the Gemini client becomes LLMError."""
        mocker.patch(
            "commitcue.llm.google_provider.genai.Client",
            side_effect=RuntimeError("bad credentials"),
        )

        provider = get_provider(LLMProvider.GOOGLE)
        with patch.dict(os.environ, {"GOOGLE_API_KEY": "k"}):
            with pytest.raises(LLMError) as exc_info:
                provider.generate("prompt")

        assert "bad credentials" in str(exc_info.value)
