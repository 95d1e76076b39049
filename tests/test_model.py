import pytest

from bbbs.message_id import MessageId
from bbbs.model import ReadMessage, Version, WriteMessage


def test_message_create():
    content = "Hello, world!"
    message = WriteMessage.create(content)
    assert message.content == content
    assert str(message.id) != ""
    assert len(str(message.id)) == 36


def test_message_create_generates_distinct_ids():
    first = WriteMessage.create("a")
    second = WriteMessage.create("a")
    assert first.id != second.id


def test_message_create_id_is_parseable():
    message = WriteMessage.create("x")
    assert MessageId.parse(str(message.id)) == message.id


def test_read_message_fields():
    message = ReadMessage(content="foo", id="28cec994-e1c6-4987-b151-a4e66db42bda")
    assert message.content == "foo"
    assert message.id == "28cec994-e1c6-4987-b151-a4e66db42bda"


def test_version_ordering():
    assert Version(1) < Version(2)
    assert Version(3) == Version(3)
    assert max(Version(7), Version(2)) == Version(7)


@pytest.mark.parametrize("value", [-1, 2**32])
def test_version_out_of_range(value):
    with pytest.raises(ValueError):
        Version(value)


def test_version_bounds_accepted():
    assert Version(0).value == 0
    assert Version(2**32 - 1).value == 4_294_967_295