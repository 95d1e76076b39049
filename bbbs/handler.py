"""The application's page rendering, root page and route assembly."""

from __future__ import annotations

import html

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from bbbs.messages import routes as message_routes

__all__ = ["render_page", "root", "build_app"]


def render_page(title: str, body: str, status_code: int = 200) -> HTMLResponse:
    """Wrap an HTML fragment in a full page; the title is escaped."""
    return HTMLResponse(
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        '<head><meta charset="utf-8"><title>'
        f"{html.escape(title)}</title></head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n",
        status_code=status_code,
    )


async def root(request: Request) -> HTMLResponse:
    """Show the front page."""
    return render_page(
        "bbbs",
        '<h1>bbbs</h1>\n<p><a href="/messages">messages</a></p>',
    )


def build_app(state: object) -> Starlette:
    """Build the application around a store that reads and writes messages."""
    app = Starlette(routes=[*message_routes(), Route("/", root, methods=["GET"])])
    app.state.store = state
    return app