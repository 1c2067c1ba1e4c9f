"""
Demo application: long namespaced headings with switchable word breaks.

Open ``/?wordbreak=on&minchars=10`` to see breaks inserted and narrow the
window to watch the headings wrap.
"""

from html import escape
from typing import Optional

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from ..adapters.starlette import QueryToggledWordBreakMiddleware
from ..core.abc import Logger
from ..options.schema import WordBreakOptions

SAMPLE_IDENTIFIERS = [
    "System.Net.Http.HttpClientHandler",
    "Microsoft.Extensions.DependencyInjection.ServiceCollection",
    "MyLittleContentEngine.IntegrationTests.ExampleProjects.MultipleContentSourceExampleWebApplicationFactory",
    "System.IO.XMLHttpRequestFactory",
]

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<title>Word break demo</title>
<style>.narrow {{ width: 12em; border: 1px solid #ccc; }}</style>
</head>
<body>
<p>Word breaks are {state}. Minimum characters: {min_chars}.</p>
<div class="narrow">
{headings}
<code class="text-break">{code}</code>
<p>{paragraph}</p>
</div>
</body>
</html>
"""


def render_index(request: Request) -> str:
    enabled = request.query_params.get("wordbreak") == "on"
    min_chars = request.query_params.get("minchars", str(WordBreakOptions().minimum_characters))
    headings = "\n".join(f"<h2>{name}</h2>" for name in SAMPLE_IDENTIFIERS)
    return PAGE_TEMPLATE.format(
        state="on" if enabled else "off",
        min_chars=escape(min_chars),
        headings=headings,
        code=SAMPLE_IDENTIFIERS[-1],
        paragraph=f"Paragraph text such as {SAMPLE_IDENTIFIERS[0]} is left alone.",
    )


async def index(request: Request) -> HTMLResponse:
    return HTMLResponse(render_index(request))


def create_app(options: Optional[WordBreakOptions] = None,
               logger: Optional[Logger] = None) -> Starlette:
    """Create the demo Starlette application."""
    return Starlette(
        routes=[Route("/", index)],
        middleware=[
            Middleware(QueryToggledWordBreakMiddleware, options=options, logger=logger),
        ],
    )
