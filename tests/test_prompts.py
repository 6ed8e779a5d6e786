"""
Unit tests for prompt construction and temperature selection.
"""

import pytest

from word_translator.core.languages import LANGUAGE_MAP, language_name
from word_translator.core.prompts import (
    CASUAL_PROMPT,
    DETECTED_MARKER,
    DOMAINS,
    STYLES,
    STYLE_INSTRUCTIONS,
    TranslationRequest,
    build_prompt_spec,
    build_system_prompt,
    select_temperature,
    split_detected_language,
)


class TestLanguages:
    """Test language lookups."""

    def test_known_codes(self):
        assert language_name("es") == "Spanish"
        assert language_name("zh-TW") == "Chinese (Traditional)"
        assert len(LANGUAGE_MAP) == 31

    def test_unknown_code_raises(self):
        with pytest.raises(ValueError, match="Unsupported language: xx"):
            language_name("xx")


class TestBuildSystemPrompt:
    """Test system prompt construction."""

    @pytest.mark.parametrize("domain", DOMAINS)
    @pytest.mark.parametrize("style", STYLES)
    def test_every_combination_names_target(self, domain, style):
        """Every domain/style pair yields a prompt naming the target language."""
        prompt = build_system_prompt("en", "Japanese", domain, style)
        assert prompt
        assert "Japanese" in prompt

    def test_explicit_source_is_named(self):
        prompt = build_system_prompt("fr", "German", "general", "balanced")
        assert "Translate from French to German." in prompt
        assert DETECTED_MARKER not in prompt

    def test_auto_detect_asks_for_marker(self):
        prompt = build_system_prompt("auto", "German", "general", "balanced")
        assert "Detect the source language and translate to German." in prompt
        assert DETECTED_MARKER in prompt

    def test_domain_template_and_style_are_combined(self):
        prompt = build_system_prompt("en", "Arabic", "legal", "strict")
        assert prompt.startswith("You are a certified legal translator.")
        assert STYLE_INSTRUCTIONS["strict"] in prompt

    def test_casual_overrides_style(self):
        for style in STYLES:
            prompt = build_system_prompt("en", "Spanish", "casual", style)
            assert prompt.startswith(CASUAL_PROMPT)
            assert STYLE_INSTRUCTIONS[style] not in prompt

    def test_unknown_domain_uses_generic_prompt(self):
        prompt = build_system_prompt("en", "Spanish", "poetry", "human")
        assert prompt.startswith("You are a professional translator.")
        assert STYLE_INSTRUCTIONS["human"] in prompt

    def test_deterministic(self):
        first = build_system_prompt("auto", "Korean", "medical", "balanced")
        second = build_system_prompt("auto", "Korean", "medical", "balanced")
        assert first == second


class TestSelectTemperature:
    """Test ordered-priority temperature selection."""

    @pytest.mark.parametrize("domain", DOMAINS)
    def test_strict_is_lowest(self, domain):
        lowest = min(
            select_temperature(style, d) for style in STYLES for d in DOMAINS
        )
        assert select_temperature("strict", domain) == 0.1
        assert select_temperature("strict", domain) == lowest

    @pytest.mark.parametrize("domain", DOMAINS)
    def test_human_is_mid_value(self, domain):
        assert select_temperature("human", domain) == 0.4

    @pytest.mark.parametrize("domain", ["legal", "certificate", "bank", "medical", "government"])
    def test_precise_domains(self, domain):
        temperature = select_temperature("balanced", domain)
        assert temperature == 0.15
        assert select_temperature("strict", domain) < temperature < select_temperature("balanced", "general")

    @pytest.mark.parametrize("domain", ["academic", "business", "technical"])
    def test_flexible_domains(self, domain):
        assert select_temperature("balanced", domain) == 0.2

    def test_casual_and_fallback(self):
        assert select_temperature("balanced", "casual") == 0.4
        assert select_temperature("balanced", "general") == 0.3
        assert select_temperature("balanced", "unknown") == 0.3


class TestPromptSpec:
    """Test deriving a prompt spec from a request."""

    def test_example_request(self):
        request = TranslationRequest(
            text="Hello world",
            source_language="auto",
            target_language="es",
            domain="general",
            style="balanced",
        )
        spec = build_prompt_spec(request)
        assert spec.temperature == 0.3
        assert "Spanish" in spec.system_prompt
        assert request.is_auto_detect

    def test_unknown_target_raises(self):
        request = TranslationRequest(text="x", source_language="en", target_language="xx")
        with pytest.raises(ValueError):
            build_prompt_spec(request)


class TestSplitDetectedLanguage:
    """Test splitting the detected-language marker off replies."""

    def test_trailing_marker(self):
        assert split_detected_language("Hola mundo\nDETECTED: English") == ("Hola mundo", "English")

    def test_marker_without_newline(self):
        assert split_detected_language("Bonjour DETECTED:German") == ("Bonjour", "German")

    def test_no_marker(self):
        assert split_detected_language("  Hola mundo \n") == ("Hola mundo", None)

    def test_last_marker_wins(self):
        text = "Le mot DETECTED: apparait\n\nDETECTED: English"
        assert split_detected_language(text) == ("Le mot DETECTED: apparait", "English")

    def test_empty_marker_value(self):
        assert split_detected_language("Hola\nDETECTED:") == ("Hola", None)
