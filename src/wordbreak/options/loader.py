"""YAML options loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Union
from pydantic import ValidationError
from .schema import WordBreakOptions


class OptionsLoadError(Exception):
    """Exception raised when options loading or validation fails."""
    pass


def load_options(path: Union[str, Path]) -> WordBreakOptions:
    """
    Load and validate word-break options from a YAML file.

    Args:
        path: Path to YAML options file

    Returns:
        WordBreakOptions: Validated options object

    Raises:
        OptionsLoadError: If file cannot be read or options are invalid
    """
    path = Path(path)

    if not path.exists():
        raise OptionsLoadError(f"Options file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise OptionsLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise OptionsLoadError(f"Cannot read options file {path}: {e}")

    return _build_options(data, source=str(path))


def load_options_from_string(yaml_content: str) -> WordBreakOptions:
    """
    Load and validate word-break options from a YAML string.

    An empty document yields the default options.

    Args:
        yaml_content: YAML content as string

    Returns:
        WordBreakOptions: Validated options object

    Raises:
        OptionsLoadError: If YAML is invalid or options validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise OptionsLoadError(f"Invalid YAML content: {e}")

    return _build_options(data, source="content")


def _build_options(data: Any, source: str) -> WordBreakOptions:
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise OptionsLoadError(f"Options {source} must contain a YAML mapping, got {type(data)}")

    try:
        options = WordBreakOptions.model_validate(data)
    except ValidationError as e:
        raise OptionsLoadError(f"Options validation failed: {e}")

    # Run additional validation
    issues = options.validate_options()
    if issues:
        raise OptionsLoadError(f"Options validation issues: {'; '.join(issues)}")

    return options
