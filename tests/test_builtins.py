"""Tests for commitcue.backends.builtins module."""

import os
from unittest.mock import MagicMock, patch

import pytest

from commitcue.backends import CapabilityError, OutcomeKind, invoke, resolve_descriptor
from commitcue.backends.builtins import (
    default_registry,
    ollama_is_running,
    strip_code_fences,
    trim_whitespace,
)
from commitcue.config import build_config
from commitcue.llm import LLMError, LLMProvider, LLMResult


class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_removes_fence_with_language(self):
        """Test removing a ```text fence."""
        assert strip_code_fences("```text\nfeat: add parser\n```") == "feat: add parser"

    def test_removes_plain_fence(self):
        """Test removing a bare ``` fence."""
        assert strip_code_fences("```\nfix: typo\n\n- detail\n```\n") == "fix: typo\n\n- detail"

    def test_unfenced_text_unchanged(self):
        """Test that text without a fence is returned as is."""
        text = "feat: add parser\n\n- uses ```code``` inline\n"
        assert strip_code_fences(text) == text

    def test_unterminated_fence(self):
        """Test that an opening fence without a closing one is still dropped."""
        assert strip_code_fences("```\nfeat: add parser") == "feat: add parser"


class TestTrimWhitespace:
    """Tests for trim_whitespace."""

    def test_strips_trailing_spaces_and_blank_edges(self):
        """Test trimming per line and at both ends."""
        assert trim_whitespace("\n\nfeat: x   \n\n- a  \n\n") == "feat: x\n\n- a"

    def test_keeps_indentation(self):
        """Test that leading indentation inside lines survives."""
        assert trim_whitespace("title\n\n  - nested") == "title\n\n  - nested"


class TestDefaultRegistry:
    """Tests for default_registry."""

    def test_registers_builtins(self):
        """Test that the documented capabilities are registered."""
        registry = default_registry()

        for name in ("anthropic", "openai", "google", "ollama", "strip-fences", "trim"):
            assert name in registry

    def test_ollama_is_external(self):
        """Test that ollama runs as an external command."""
        assert not default_registry().get("ollama").is_builtin

    def test_filters_run_in_process(self):
        """Test running the built-in filters through the invoker."""
        registry = default_registry()

        outcome = invoke(resolve_descriptor(["strip-fences"], registry), "```\nfeat: x\n```")

        assert outcome.kind is OutcomeKind.SUCCESS
        assert outcome.output == "feat: x"

    def test_filter_rejects_arguments(self):
        """Test that filters taking no arguments fail when given some."""
        runner = default_registry().get("trim").runner

        with pytest.raises(CapabilityError):
            runner(["--wide"], "text")

    def test_provider_unconfigured_without_key(self, mocker):
        """Test that a provider without an API key is unconfigured."""
        mocker.patch("commitcue.global_config.get_credential", return_value=None)

        with patch.dict(os.environ, {}, clear=True):
            outcome = invoke(resolve_descriptor(["anthropic"], default_registry()), "prompt")

        assert outcome.kind is OutcomeKind.UNCONFIGURED
        assert "ANTHROPIC_API_KEY" in outcome.hint

    def test_provider_configured_from_credentials(self, mocker):
        """Test that a key in the credentials file configures the provider."""
        mocker.patch("commitcue.global_config.get_credential", return_value="sk-test")

        with patch.dict(os.environ, {}, clear=True):
            capability = default_registry().get("openai")
            assert capability.is_configured() is True

    def test_provider_runner_uses_model_argument(self, mocker):
        """Test that the optional argument selects the model."""
        provider = MagicMock()
        provider.generate.return_value = LLMResult(
            text="feat: add parser", model="gpt-4o", input_tokens=10, output_tokens=5
        )
        mock_get = mocker.patch("commitcue.backends.builtins.get_provider", return_value=provider)
        config = build_config({"max_tokens": 400, "temperature": 0.0})

        runner = default_registry(config).get("openai").runner
        result = runner(["gpt-4o"], "the prompt")

        assert result == "feat: add parser"
        mock_get.assert_called_once_with(
            LLMProvider.OPENAI, model="gpt-4o", max_tokens=400, temperature=0.0
        )
        provider.generate.assert_called_once_with("the prompt")

    def test_provider_runner_wraps_llm_error(self, mocker):
        """Test that LLM errors become capability errors."""
        provider = MagicMock()
        provider.generate.side_effect = LLMError("rate limited")
        mocker.patch("commitcue.backends.builtins.get_provider", return_value=provider)

        runner = default_registry().get("google").runner

        with pytest.raises(CapabilityError) as exc_info:
            runner([], "prompt")

        assert "rate limited" in str(exc_info.value)

    def test_provider_runner_rejects_extra_arguments(self):
        """Test that more than one argument is an error."""
        runner = default_registry().get("anthropic").runner

        with pytest.raises(CapabilityError):
            runner(["model-a", "model-b"], "prompt")


class TestOllamaIsRunning:
    """Tests for ollama_is_running."""

    def test_running(self, mocker):
        """Test that a successful ollama list means running."""
        mock_run = mocker.patch("subprocess.run")
        mock_run.return_value.returncode = 0

        assert ollama_is_running() is True

    def test_not_running(self, mocker):
        """Test that a failing ollama list means not running."""
        mock_run = mocker.patch("subprocess.run")
        mock_run.return_value.returncode = 1

        assert ollama_is_running() is False

    def test_not_installed(self, mocker):
        """Test that a missing binary means not running."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        assert ollama_is_running() is False
