"""Result structures for rewrite operations."""

from dataclasses import dataclass


@dataclass
class RewriteResult:
    """Result of rewriting one response body."""
    text: str                    # Body after rewriting (original if untouched)
    processed: bool              # Whether the body went through the rewriter
    fragments_seen: int = 0      # Candidate fragments found (whole body counts as one)
    fragments_changed: int = 0   # Fragments that received at least one marker
    fragments_skipped: int = 0   # Selected elements rejected for containing markup

    @property
    def changed_ratio(self) -> float:
        """Fraction of candidate fragments that were changed."""
        if not self.fragments_seen:
            return 0.0
        return self.fragments_changed / self.fragments_seen
