"""Unit tests for reference prompt rendering."""

import pytest

from provider_core.core.knowledge import REFERENCE_PROMPT, missing_placeholders, render_reference_prompt


@pytest.mark.unit
class TestRenderReferencePrompt:
    def test_basic_substitution(self):
        assert render_reference_prompt("Q:{question} R:{references}", "hi", "doc1") == "Q:hi R:doc1"

    def test_only_first_occurrence_replaced(self):
        result = render_reference_prompt("{question} {question} {references} {references}", "q", "r")
        assert result == "q {question} r {references}"

    def test_question_substituted_before_references(self):
        # A user question containing the references placeholder receives the references
        result = render_reference_prompt("Q:{question} R:{references}", "about {references}", "DOCS")
        assert result == "Q:about DOCS R:{references}"

    def test_template_without_placeholders_unchanged(self):
        assert render_reference_prompt("static text", "q", "r") == "static text"

    def test_default_template_renders_both(self):
        result = render_reference_prompt(REFERENCE_PROMPT, "What is X?", "[1] X is Y")
        assert "What is X?" in result
        assert "[1] X is Y" in result
        assert "{question}" not in result
        assert "{references}" not in result


@pytest.mark.unit
class TestMissingPlaceholders:
    @pytest.mark.parametrize(
        ("template", "expected"),
        [
            ("{question} {references}", []),
            ("{question}", ["{references}"]),
            ("{references}", ["{question}"]),
            ("plain", ["{question}", "{references}"]),
        ],
    )
    def test_reports_missing(self, template, expected):
        assert missing_placeholders(template) == expected

    def test_default_template_complete(self):
        assert missing_placeholders(REFERENCE_PROMPT) == []
