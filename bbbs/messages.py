"""HTTP handlers for creating, reading and listing messages."""

from __future__ import annotations

import html
from typing import Protocol, runtime_checkable
from urllib.parse import parse_qsl

from starlette.requests import Request
from starlette.responses import HTMLResponse, Response
from starlette.routing import Route

from bbbs.message_id import MessageId, MessageIdError
from bbbs.model import ReadMessage, Version, WriteMessage

__all__ = [
    "MessageReader",
    "MessageRepository",
    "MessageRepositoryError",
    "InternalError",
    "NotFoundError",
    "VersionMismatchError",
    "create_message",
    "get_message",
    "list_messages",
    "routes",
]

_FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"


@runtime_checkable
class MessageReader(Protocol):
    """Read access to stored messages."""

    def get_message(self, id: MessageId) -> ReadMessage | None:
        """Return the message with the given id, or None if there is none."""

    def list_messages(self) -> list[ReadMessage]:
        """Return every stored message."""


class MessageRepositoryError(Exception):
    """Base class of the errors a message repository raises."""


class InternalError(MessageRepositoryError):
    """The repository failed for a reason of its own."""

    def __init__(self, source: BaseException | str) -> None:
        super().__init__(f"internal error: {source}")
        self.source = source


class NotFoundError(MessageRepositoryError):
    """The message to be stored against does not exist."""

    def __init__(self, id: MessageId) -> None:
        super().__init__(f"not found {id!r}")
        self.id = id


class VersionMismatchError(MessageRepositoryError):
    """The stored version differs from the one the writer expected."""

    def __init__(self, actual: Version, expected: Version) -> None:
        super().__init__(
            f"version mismatch (expected: {expected!r}, actual: {actual!r})"
        )
        self.actual = actual
        self.expected = expected


@runtime_checkable
class MessageRepository(Protocol):
    """Write access to stored messages."""

    def store(self, version: Version | None, message: WriteMessage) -> None:
        """Store a message, raising MessageRepositoryError on failure."""


def _status_for(error: MessageRepositoryError) -> int:
    match error:
        case NotFoundError():
            return 404
        case VersionMismatchError():
            return 409
        case _:
            return 500


def _page(title: str, body: str) -> HTMLResponse:
    return HTMLResponse(
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        '<head><meta charset="utf-8"><title>'
        f"{html.escape(title)}</title></head>\n"
        f"<body>\n{body}\n</body>\n"
        "</html>\n"
    )


def _state(request: Request):
    return request.app.state.store


async def create_message(request: Request) -> Response:
    """Store a message posted as a form and redirect to its page."""
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type != _FORM_MEDIA_TYPE:
        return Response(status_code=415)

    body = await request.body()
    fields = parse_qsl(
        body.decode("utf-8", errors="replace"),
        keep_blank_values=True,
        errors="replace",
    )
    contents = [value for key, value in fields if key == "content"]
    if len(contents) != 1:
        return Response(status_code=422)

    message = WriteMessage.create(contents[0])
    try:
        _state(request).store(None, message)
    except MessageRepositoryError as error:
        return Response(status_code=_status_for(error))

    return Response(
        status_code=303,
        headers={"location": f"/messages/{message.id}"},
        media_type=_FORM_MEDIA_TYPE,
    )


async def get_message(request: Request) -> Response:
    """Show a single message."""
    try:
        message_id = MessageId.parse(request.path_params["id"])
    except MessageIdError:
        return Response(status_code=400)

    message = _state(request).get_message(message_id)
    if message is None:
        return Response(status_code=404)

    return _page(
        "bbbs - message",
        "<h1>message</h1>\n"
        f"<p>{html.escape(message.content)}</p>\n"
        '<p><a href="/messages">messages</a></p>',
    )


async def list_messages(request: Request) -> Response:
    """Show every message together with a form for posting a new one."""
    items = "\n".join(
        f'<li><a href="/messages/{html.escape(message.id)}">'
        f"{html.escape(message.content)}</a></li>"
        for message in _state(request).list_messages()
    )
    return _page(
        "bbbs - messages",
        "<h1>messages</h1>\n"
        '<form method="post" action="/messages">\n'
        '<textarea name="content"></textarea>\n'
        '<button type="submit">post</button>\n'
        "</form>\n"
        f"<ul>\n{items}\n</ul>",
    )


def routes() -> list[Route]:
    """Return the routes serving messages."""
    return [
        Route("/messages", list_messages, methods=["GET"]),
        Route("/messages", create_message, methods=["POST"]),
        Route("/messages/{id}", get_message, methods=["GET"]),
    ]