from sentry_protocol.interfaces.message import Message
from sentry_protocol.level import Level


def test_message_validity():
    assert not Message().is_valid()
    assert not Message(params="EXCEPTION_FOUND").is_valid()
    assert Message(message="abcd").is_valid()


def test_message_to_json():
    message = Message(message="abcd", params="EXCEPTION_FOUND", level=Level.INFO)

    assert message.to_json() == {
        "message": "abcd",
        "params": "EXCEPTION_FOUND",
        "level": "info",
    }


def test_message_omits_undefined_level():
    assert Message(message="abcd").to_json() == {"message": "abcd"}


def test_message_round_trip():
    message = Message(message="abcd", params="EXCEPTION_FOUND", level=Level.DEBUG)

    assert Message.from_json(message.to_json()) == message


def test_message_from_json_lenient():
    message = Message.from_json(
        {
            "message": "abcd",
            "params": 3,
            "level": "loud",
            "custom": "x",
            "nested": {"a": 1},
        }
    )

    assert message.message == "abcd"
    assert message.params == ""
    assert message.level is Level.UNDEFINED
    assert message.additional_fields == {"custom": "x"}
    assert message.to_json() == {"message": "abcd", "custom": "x"}


def test_message_additional_fields():
    message = Message(message="abcd", additional_fields={"origin": "cron", "count": 3})

    assert message.additional_fields == {"origin": "cron"}
    assert message.to_json() == {"message": "abcd", "origin": "cron"}
