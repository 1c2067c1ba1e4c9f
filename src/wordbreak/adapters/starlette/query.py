"""Request-scoped options parsed from query string flags."""

from typing import Mapping, Optional

from ...options.schema import WordBreakOptions

ENABLE_PARAM = "wordbreak"
MIN_CHARS_PARAM = "minchars"


def options_from_query(query_params: Mapping[str, str],
                       base: Optional[WordBreakOptions] = None) -> Optional[WordBreakOptions]:
    """
    Build options for a single request.

    Args:
        query_params: Query parameters of the request
        base: Options to start from (defaults when omitted)

    Returns:
        WordBreakOptions if ``wordbreak=on`` is present, otherwise None.
        A ``minchars`` value that is not a non-negative integer is ignored.
    """
    if query_params.get(ENABLE_PARAM) != "on":
        return None

    options = base or WordBreakOptions()

    min_chars = query_params.get(MIN_CHARS_PARAM)
    if min_chars is not None:
        try:
            value = int(min_chars)
        except ValueError:
            return options
        if value >= 0:
            options = options.with_overrides(minimum_characters=value)

    return options
