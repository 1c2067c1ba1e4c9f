"""
Starlette middleware that inserts word breaks into outgoing responses.

The downstream response is buffered completely, then either replayed
unchanged or decoded, rewritten and re-encoded.
"""

from typing import Any, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from ...core.abc import Logger, Meter
from ...core.util import parse_charset
from ...options.schema import WordBreakOptions
from ...runtime.rewriter import ResponseRewriter, ensure_valid_options
from .query import options_from_query


async def _read_body(response: Response) -> bytes:
    body = getattr(response, "body", None)
    if body is not None:
        return body
    return b"".join([chunk async for chunk in response.body_iterator])


def _rebuild_response(response: Response, body: bytes) -> Response:
    """Copy status, headers and background of response around a new body."""
    new_response = Response(content=body, status_code=response.status_code,
                            background=response.background)
    raw_headers = [(k, v) for k, v in response.raw_headers if k.lower() != b"content-length"]
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))
    new_response.raw_headers = raw_headers
    return new_response


async def rewrite_response(rewriter: ResponseRewriter, response: Response,
                           logger: Optional[Logger] = None,
                           meter: Optional[Meter] = None) -> Response:
    """
    Buffer a response and rewrite its body when the rewriter accepts it.

    Args:
        rewriter: Rewriter holding the request's options
        response: Response produced by the downstream application
        logger: Optional structured logger
        meter: Optional metrics collector

    Returns:
        Response: A response carrying the original or rewritten body
    """
    body = await _read_body(response)
    content_type = response.headers.get("content-type")

    if not rewriter.should_process(response.status_code, content_type):
        if meter:
            meter.inc("wordbreak.responses_passed_through")
        return _rebuild_response(response, body)

    charset = parse_charset(content_type)
    try:
        text = body.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        if logger:
            logger.warn("undecodable_body", charset=charset, error=str(e))
        if meter:
            meter.inc("wordbreak.responses_passed_through")
        return _rebuild_response(response, body)

    result = rewriter.rewrite(text, content_type)

    if "text/html" in (content_type or "").lower():
        # Markers outside the charset become character references
        encoded = result.text.encode(charset, errors="xmlcharrefreplace")
    else:
        try:
            encoded = result.text.encode(charset)
        except UnicodeEncodeError as e:
            if logger:
                logger.warn("unencodable_body", charset=charset, error=str(e))
            if meter:
                meter.inc("wordbreak.responses_passed_through")
            return _rebuild_response(response, body)

    if meter:
        meter.inc("wordbreak.responses_rewritten")
        meter.observe("wordbreak.changed_ratio", result.changed_ratio)
    if logger:
        logger.info("response_rewritten",
                    status=response.status_code,
                    content_type=content_type,
                    fragments_changed=result.fragments_changed)

    return _rebuild_response(response, encoded)


class WordBreakMiddleware(BaseHTTPMiddleware):
    """Middleware that rewrites every qualifying response with fixed options."""

    def __init__(self, app: ASGIApp, options: Optional[WordBreakOptions] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None) -> None:
        """
        Initialize word-break middleware.

        Args:
            app: The ASGI application
            options: Word-break options (defaults are used when omitted)
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        super().__init__(app)
        self.options = options or WordBreakOptions()
        self.rewriter = ResponseRewriter(options=self.options, logger=logger, meter=meter)
        self.log = logger
        self.meter = meter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        return await rewrite_response(self.rewriter, response, self.log, self.meter)


class QueryToggledWordBreakMiddleware(BaseHTTPMiddleware):
    """
    Middleware that enables word breaks per request from the query string.

    ``?wordbreak=on`` switches rewriting on and ``minchars=N`` overrides the
    minimum length. Other requests pass straight through.
    """

    def __init__(self, app: ASGIApp, options: Optional[WordBreakOptions] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None) -> None:
        super().__init__(app)
        self.options = ensure_valid_options(options or WordBreakOptions())
        self.log = logger
        self.meter = meter

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_options = options_from_query(request.query_params, base=self.options)
        if request_options is None:
            return await call_next(request)

        rewriter = ResponseRewriter(options=request_options, logger=self.log, meter=self.meter)
        response = await call_next(request)
        return await rewrite_response(rewriter, response, self.log, self.meter)


def add_word_break(app: Any, options: Optional[WordBreakOptions] = None,
                   *, logger: Optional[Logger] = None, meter: Optional[Meter] = None,
                   **overrides: Any) -> Any:
    """
    Add WordBreakMiddleware to a Starlette (or FastAPI) application.

    Args:
        app: Application exposing ``add_middleware``
        options: Base options; defaults are used when omitted
        logger: Optional structured logger
        meter: Optional metrics collector
        **overrides: Option fields to change, e.g. ``minimum_characters=10``

    Returns:
        The application, for chaining
    """
    options = options or WordBreakOptions()
    if overrides:
        options = options.with_overrides(**overrides)
    ensure_valid_options(options)
    app.add_middleware(WordBreakMiddleware, options=options, logger=logger, meter=meter)
    return app
