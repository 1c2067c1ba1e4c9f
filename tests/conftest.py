"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from wordbreak.options.loader import load_options_from_string
from wordbreak.options.schema import WordBreakOptions
from wordbreak.segmenters.wordbreak import WordBreakSegmenter
from wordbreak.examples.utils import InMemoryMeter


@pytest.fixture
def make_segmenter():
    """Provide a factory for segmenters with test-friendly defaults."""
    def _make(minimum_characters: int = 10, word_break_characters: str = "<wbr>", **kwargs):
        options = WordBreakOptions(
            minimum_characters=minimum_characters,
            word_break_characters=word_break_characters,
            **kwargs
        )
        return WordBreakSegmenter(options)
    return _make


@pytest.fixture
def sample_options_yaml():
    """Provide a sample options YAML for testing."""
    return """
minimum_characters: 10
word_break_characters: "<wbr>"
process_html_only: true
css_selector: "h1, h2, h3, .text-break"
"""


@pytest.fixture
def sample_options(sample_options_yaml):
    """Provide a loaded options object for testing."""
    return load_options_from_string(sample_options_yaml)


@pytest.fixture
def temp_options_file(sample_options_yaml):
    """Provide a temporary options file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_options_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide an in-memory meter."""
    return InMemoryMeter()
