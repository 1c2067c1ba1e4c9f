"""Response rewriter that feeds qualifying text fragments to a text processor."""

import warnings
from typing import Optional

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from ..core.abc import TextProcessor, Logger, Meter
from ..core.errors import InvalidConfigurationError
from ..core.types import RewriteResult
from ..options.schema import WordBreakOptions
from ..segmenters.wordbreak import WordBreakSegmenter

# Minimal escaping with HTML void elements, so markers render as <wbr>.
HTML_OUTPUT_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def _parse_fragment(markup: str) -> BeautifulSoup:
    """Parse processed text so markup markers become elements."""
    with warnings.catch_warnings():
        # Short identifiers such as "index.html" look like file names to bs4
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(markup, "html.parser")


def ensure_valid_options(options: WordBreakOptions) -> WordBreakOptions:
    """
    Reject missing options or options that validate_options() flags.

    Raises:
        InvalidConfigurationError: If options are None or have issues
    """
    if options is None:
        raise InvalidConfigurationError("Word-break options are required")

    issues = options.validate_options()
    if issues:
        raise InvalidConfigurationError(f"Invalid word-break options: {'; '.join(issues)}")
    return options


class ResponseRewriter:
    """
    Rewrites response bodies by passing pure-text fragments to a processor.

    HTML bodies are parsed and only the text of elements matching the
    configured CSS selector is rewritten; other text bodies are rewritten
    whole when HTML-only processing is switched off.
    """

    def __init__(self, *, options: WordBreakOptions,
                 processor: Optional[TextProcessor] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize rewriter with options and dependencies.

        Args:
            options: Word-break options
            processor: Text processor (defaults to WordBreakSegmenter)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.options = ensure_valid_options(options)
        self.processor = processor or WordBreakSegmenter(options)
        self.log = logger
        self.meter = meter

    def should_process(self, status_code: int, content_type: Optional[str]) -> bool:
        """Decide whether a response with this status and type is rewritten."""
        if status_code != 200:
            return False

        content_type = (content_type or "").lower()
        if "text/html" in content_type:
            return True

        return not self.options.process_html_only and "text/" in content_type

    def rewrite(self, body: str, content_type: Optional[str] = "text/html") -> RewriteResult:
        """
        Rewrite a response body.

        Args:
            body: Decoded response body
            content_type: Content-Type of the response

        Returns:
            RewriteResult: Rewritten body with fragment counts
        """
        if "text/html" not in (content_type or "").lower():
            processed = self.processor.process(body)
            changed = int(processed != body)
            self._record(fragments_changed=changed, fragments_skipped=0)
            return RewriteResult(text=processed, processed=True,
                                 fragments_seen=1, fragments_changed=changed)

        return self._rewrite_html(body)

    def _rewrite_html(self, html: str) -> RewriteResult:
        soup = BeautifulSoup(html, "html.parser")

        # select() returns a list, so edits below do not disturb iteration
        selector = self.options.css_selector.strip()
        elements = soup.select(selector) if selector else []

        changed = 0
        skipped = 0
        for element in elements:
            text = element.get_text()

            # Only pure-text leaves; markup or escaped characters stay as is
            if element.decode_contents().strip() != text.strip():
                skipped += 1
                if self.log:
                    self.log.info("fragment_skipped", element=element.name,
                                  reason="contains_markup")
                continue

            processed = self.processor.process(text)
            if processed != text:
                element.clear()
                element.append(_parse_fragment(processed))
                changed += 1

        self._record(fragments_changed=changed, fragments_skipped=skipped)
        if self.log:
            self.log.info("rewrite_complete", selector=self.options.css_selector,
                          fragments_seen=len(elements),
                          fragments_changed=changed,
                          fragments_skipped=skipped)

        return RewriteResult(
            text=soup.decode(formatter=HTML_OUTPUT_FORMATTER),
            processed=True,
            fragments_seen=len(elements),
            fragments_changed=changed,
            fragments_skipped=skipped,
        )

    def _record(self, *, fragments_changed: int, fragments_skipped: int) -> None:
        if self.meter:
            self.meter.inc("wordbreak.fragments_changed", fragments_changed)
            self.meter.inc("wordbreak.fragments_skipped", fragments_skipped)
