"""Pydantic schema for word-break options."""

from typing import Any, List, Optional

import soupsieve
from pydantic import BaseModel, Field, field_validator

DEFAULT_MINIMUM_CHARACTERS = 20
DEFAULT_WORD_BREAK_CHARACTERS = "<wbr>"
DEFAULT_CSS_SELECTOR = "h1, h2, h3, h4, h5, h6, .text-break"


class WordBreakOptions(BaseModel):
    """Options shared by the segmenter and the response rewriter."""
    minimum_characters: int = Field(default=DEFAULT_MINIMUM_CHARACTERS, ge=0,
                                    description="Length below which no breaks are inserted")
    word_break_characters: str = Field(default=DEFAULT_WORD_BREAK_CHARACTERS,
                                       description="Literal inserted at each break point")
    process_html_only: bool = Field(default=True,
                                    description="Only rewrite text/html responses")
    css_selector: Optional[str] = Field(default=DEFAULT_CSS_SELECTOR,
                                        description="Selector for elements whose text is rewritten")
    require_dot_for_case_breaks: bool = Field(default=False,
                                              description="Leave words without dots untouched")

    class Config:
        extra = "forbid"  # Strict validation
        frozen = True

    @field_validator("css_selector", mode="before")
    @classmethod
    def _default_selector(cls, value: Any) -> Any:
        return DEFAULT_CSS_SELECTOR if value is None else value

    def with_overrides(self, **changes: Any) -> "WordBreakOptions":
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def validate_options(self) -> List[str]:
        """Validate option combinations and return any issues."""
        issues = []

        if self.process_html_only and not self.css_selector.strip():
            issues.append("css_selector is empty while process_html_only is set")
        elif self.css_selector.strip():
            try:
                soupsieve.compile(self.css_selector)
            except soupsieve.SelectorSyntaxError as e:
                issues.append(f"Invalid css_selector '{self.css_selector}': {e}")

        return issues
