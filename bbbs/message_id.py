"""Identifiers of messages: random version-4 UUIDs."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

__all__ = ["MessageIdError", "MessageId"]


class MessageIdError(ValueError):
    """Raised when a string is not a valid message id."""

    def __init__(self, message: str = "message id error") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class MessageId:
    """A message identifier backed by a version-4 UUID."""

    value: uuid.UUID

    @classmethod
    def generate(cls) -> MessageId:
        return cls(uuid.uuid4())

    @classmethod
    def parse(cls, s: str) -> MessageId:
        try:
            parsed = uuid.UUID(s)
        except (ValueError, TypeError, AttributeError) as exc:
            raise MessageIdError() from exc
        if (parsed.int >> 76) & 0xF != 4:
            raise MessageIdError() from ValueError("invalid UUID version")
        return cls(parsed)

    def __str__(self) -> str:
        return str(self.value)