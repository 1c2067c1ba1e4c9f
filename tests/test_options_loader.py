"""Test options loading and validation."""

import pytest
from pathlib import Path
from pydantic import ValidationError

from wordbreak.options.loader import load_options, load_options_from_string, OptionsLoadError
from wordbreak.options.schema import WordBreakOptions, DEFAULT_CSS_SELECTOR


class TestOptionsLoading:
    """Test options loading from YAML files and strings."""

    def test_load_valid_options_from_string(self, sample_options_yaml):
        """Test loading valid options from YAML string."""
        options = load_options_from_string(sample_options_yaml)

        assert isinstance(options, WordBreakOptions)
        assert options.minimum_characters == 10
        assert options.word_break_characters == "<wbr>"
        assert options.process_html_only is True
        assert options.css_selector == "h1, h2, h3, .text-break"
        assert options.require_dot_for_case_breaks is False

    def test_load_valid_options_from_file(self, temp_options_file):
        """Test loading valid options from file."""
        options = load_options(temp_options_file)

        assert isinstance(options, WordBreakOptions)
        assert options.minimum_characters == 10

    def test_load_empty_document_gives_defaults(self):
        """Test that an empty document yields default options."""
        options = load_options_from_string("")

        assert options == WordBreakOptions()

    def test_load_invalid_yaml(self):
        """Test loading invalid YAML."""
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(OptionsLoadError, match="Invalid YAML"):
            load_options_from_string(invalid_yaml)

    def test_load_non_mapping(self):
        """Test loading a YAML list instead of a mapping."""
        with pytest.raises(OptionsLoadError, match="mapping"):
            load_options_from_string("- minimum_characters\n- 10\n")

    def test_load_negative_minimum(self):
        """Test loading options with a negative threshold."""
        with pytest.raises(OptionsLoadError, match="validation failed"):
            load_options_from_string("minimum_characters: -1\n")

    def test_load_extra_forbidden_fields(self):
        """Test that extra fields are forbidden."""
        with pytest.raises(OptionsLoadError, match="validation failed"):
            load_options_from_string("minimum_characters: 10\nextra_field: not_allowed\n")

    def test_load_empty_selector(self):
        """Test that an empty selector is rejected for HTML-only processing."""
        with pytest.raises(OptionsLoadError, match="css_selector is empty"):
            load_options_from_string("css_selector: '  '\n")

    def test_load_invalid_selector(self):
        """Test that a selector soupsieve cannot compile is rejected."""
        with pytest.raises(OptionsLoadError, match="Invalid css_selector"):
            load_options_from_string("css_selector: 'h1,,['\n")

    def test_load_nonexistent_file(self):
        """Test loading from non-existent file."""
        with pytest.raises(OptionsLoadError, match="not found"):
            load_options(Path("/does/not/exist.yaml"))


class TestOptionsSchema:
    """Test the options schema."""

    def test_defaults(self):
        """Test default option values."""
        options = WordBreakOptions()

        assert options.minimum_characters == 20
        assert options.word_break_characters == "<wbr>"
        assert options.process_html_only is True
        assert options.css_selector == "h1, h2, h3, h4, h5, h6, .text-break"
        assert options.require_dot_for_case_breaks is False
        assert options.validate_options() == []

    def test_none_selector_resets_to_default(self):
        """Test that a None selector means the default selector."""
        options = WordBreakOptions(css_selector=None)

        assert options.css_selector == DEFAULT_CSS_SELECTOR

    def test_options_are_immutable(self):
        """Test that options cannot be changed after construction."""
        options = WordBreakOptions()

        with pytest.raises(ValidationError):
            options.minimum_characters = 5

    def test_with_overrides(self):
        """Test that overrides produce a new validated copy."""
        options = WordBreakOptions()
        changed = options.with_overrides(minimum_characters=10, word_break_characters="&shy;")

        assert changed.minimum_characters == 10
        assert changed.word_break_characters == "&shy;"
        assert options.minimum_characters == 20

        with pytest.raises(ValidationError):
            options.with_overrides(minimum_characters=-5)

    def test_blank_selector_allowed_for_plain_text(self):
        """Test that a blank selector is fine when HTML-only is off."""
        options = WordBreakOptions(css_selector="", process_html_only=False)

        assert options.validate_options() == []
