"""Message models for reading and writing, and the store version type."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbbs.message_id import MessageId

__all__ = ["ReadMessage", "WriteMessage", "Version"]

_U32_MAX = 2**32 - 1


@dataclass
class ReadMessage:
    """A message as presented to readers."""

    content: str
    id: str


@dataclass
class WriteMessage:
    """A message as handed to the repository for storage."""

    content: str
    id: MessageId = field(default_factory=MessageId.generate)

    @classmethod
    def create(cls, content: str) -> WriteMessage:
        return cls(content=content, id=MessageId.generate())


@dataclass(frozen=True, order=True)
class Version:
    """An unsigned 32-bit version number of a stored message."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _U32_MAX:
            raise ValueError(f"version out of range: {self.value}")