import dataclasses

import pytest

from udpnotifier.messages import Message, MessageIcon


def test_zero_delay_takes_default():
    message = Message("Title", "Body", MessageIcon.WARNING, 0)
    result = message.with_default_delay(3000)
    assert result.delay == 3000
    assert (result.title, result.text, result.icon) == ("Title", "Body", MessageIcon.WARNING)


def test_explicit_delay_is_kept():
    message = Message("Title", "Body", MessageIcon.CRITICAL, 750)
    assert message.with_default_delay(3000) == message


def test_original_message_unchanged():
    message = Message("Title", "Body", MessageIcon.INFORMATION, 0)
    message.with_default_delay(1234)
    assert message.delay == 0


def test_message_is_immutable():
    message = Message("Title", "Body")
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.title = "Other"  # type: ignore[misc]
    assert message.title == "Title"


def test_default_message_fields():
    message = Message()
    assert message.title == ""
    assert message.text == ""
    assert message.icon is MessageIcon.NO_ICON
    assert message.delay == 0


@pytest.mark.parametrize("icon", list(MessageIcon))
def test_default_delay_keeps_every_icon(icon):
    result = Message("Title", "Body", icon, 0).with_default_delay(500)
    assert result.icon is icon
    assert result.delay == 500