# bbbs

A small bulletin board as an ASGI application. It serves a few HTML pages:
anyone can post a short message there, and each posted message gets its own
page. You supply the object that stores the messages.

## Installation

```
pip install .
```

## Building the application

`bbbs.handler.build_app(state)` returns a Starlette application. `state` is
the message store. It must provide the methods described by the protocols
`bbbs.messages.MessageReader` and `bbbs.messages.MessageRepository`:

- `get_message(id)` takes a `bbbs.message_id.MessageId` and returns a
  `bbbs.model.ReadMessage`, or `None` if there is no such message.
- `list_messages()` returns a list of `ReadMessage`.
- `store(version, message)` saves a `bbbs.model.WriteMessage`. `version` is a
  `bbbs.model.Version` or `None`. The posting page always passes `None`.

A minimal store that keeps its messages in a list:

```python
from bbbs.handler import build_app
from bbbs.model import ReadMessage


class ListStore:
    def __init__(self):
        self.messages = []

    def get_message(self, id):
        return next((m for m in self.messages if m.id == str(id)), None)

    def list_messages(self):
        return list(self.messages)

    def store(self, version, message):
        self.messages.append(ReadMessage(content=message.content, id=str(message.id)))


app = build_app(ListStore())
```

Any ASGI server can serve `app`.

## Pages

| Method | Path             | What it does                                   |
|--------|------------------|------------------------------------------------|
| GET    | `/`              | Front page, with a link to the message list    |
| GET    | `/messages`      | A posting form and a list of every message, each linking to its own page |
| POST   | `/messages`      | Stores a new message and answers `303 See Other` with `Location: /messages/{id}` |
| GET    | `/messages/{id}` | Shows one message                              |

Posting a message:

- The request must be `application/x-www-form-urlencoded`. Any other content
  type gets `415`.
- The form must carry exactly one `content` field. Otherwise the answer is
  `422`.
- If `store` raises, the error sets the status code.
  `bbbs.messages.NotFoundError` gives `404`.
  `bbbs.messages.VersionMismatchError` gives `409`. Any other
  `bbbs.messages.MessageRepositoryError`, `bbbs.messages.InternalError`
  included, gives `500`.

On `/messages/{id}`, an id that does not parse as a version-4 UUID gets `400`.
A well-formed id that matches no message gets `404`.

Message content is HTML-escaped on every page.
`bbbs.handler.render_page(title, body, status_code)` wraps an HTML fragment in
a complete page. The title is escaped and the body is inserted as it is.

## Value types

- `bbbs.message_id.MessageId` holds a version-4 UUID.
  - `MessageId.generate()` makes a new random id.
  - `MessageId.parse(s)` reads an id from text. It raises
    `bbbs.message_id.MessageIdError` for text that is not a UUID, or for a UUID
    that is not version 4.
  - `str()` gives the 36-character hyphenated form.
- `bbbs.model.WriteMessage.create(content)` makes a message with a freshly
  generated id.
- `bbbs.model.Version` is an unsigned 32-bit number. A value outside
  `0..2**32-1` raises `ValueError`.
- `bbbs.date_time.DateTime` holds a UTC timestamp in milliseconds.
  - `DateTime.now()` gives the current time.
  - `DateTime.from_unix_timestamp_millis(n)` builds a value from milliseconds
    since the epoch. `to_unix_timestamp_millis()` and `int()` give that number
    back.
  - `str()` gives RFC 3339 text such as `1970-01-01T00:00:01.000Z`.
  - `DateTime.parse(s)` reads RFC 3339 text with any offset and converts it to
    UTC. It raises `bbbs.date_time.DateTimeError` for malformed text, and for
    text finer than millisecond precision.

## What the package does not do

The package has no command that starts a server, and it has no message store
of its own. To run a board, write a store like the one above, pass it to
`build_app`, and serve the result with an ASGI server of your choice. Whether
messages survive a restart depends on the store you write.

## Development

```
pip install -e ".[test]"
pytest
```