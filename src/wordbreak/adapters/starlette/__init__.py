"""
Starlette integration for wordbreak.

Works with any Starlette-based framework, FastAPI included.
"""

from .middleware import (
    WordBreakMiddleware,
    QueryToggledWordBreakMiddleware,
    add_word_break,
    rewrite_response,
)
from .query import options_from_query

__all__ = [
    'WordBreakMiddleware',
    'QueryToggledWordBreakMiddleware',
    'add_word_break',
    'options_from_query',
    'rewrite_response',
]
