from sentry_protocol.interfaces.sdk import Sdk


def test_sdk_defaults():
    sdk = Sdk()

    assert sdk.is_valid()
    assert sdk.to_json() == {"name": "sentry_protocol", "version": "0.1.0"}


def test_sdk_validity():
    assert not Sdk(name="").is_valid()
    assert not Sdk(version="").is_valid()


def test_sdk_from_json():
    sdk = Sdk.from_json(
        {"name": "sentry.python", "version": "2.0.0", "integrations": ["logging", 3, "flask"]}
    )

    assert sdk.name == "sentry.python"
    assert sdk.integrations == ["logging", "flask"]
    assert Sdk.from_json(sdk.to_json()) == sdk


def test_sdk_from_json_missing_members_use_defaults():
    assert Sdk.from_json({}) == Sdk()


def test_sdk_add_to_json():
    doc = {"event_id": "abc"}
    Sdk(integrations=["logging"]).add_to_json(doc)

    assert doc == {
        "event_id": "abc",
        "sdk": {"name": "sentry_protocol", "version": "0.1.0", "integrations": ["logging"]},
    }

    untouched = {}
    Sdk(name="").add_to_json(untouched)
    assert untouched == {}
