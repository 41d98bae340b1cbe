"""Tests for `databridge.core.definition.StreamDefinition`."""

import pytest

from databridge.core.attribute import Attribute, AttributeGroup, AttributeType
from databridge.core.definition import StreamDefinition
from databridge.core.errors import MalformedStreamDefinition


def _temperature() -> StreamDefinition:
    d = StreamDefinition("Temperature", "1.0.0")
    d.add_meta_data("sensorId", AttributeType.STRING)
    d.add_correlation_data("traceId", AttributeType.STRING)
    d.add_payload_data("value", AttributeType.DOUBLE)
    return d


def test_stream_id_is_name_and_version() -> None:
    d = StreamDefinition("Temperature", "1.0.0")

    assert d.stream_id == "Temperature-1.0.0"
    assert d.name == "Temperature"
    assert d.version == "1.0.0"


@pytest.mark.parametrize("name", ["Temp-erature", "-Temperature", "Temperature-"])
def test_name_with_separator_is_rejected(name: str) -> None:
    with pytest.raises(MalformedStreamDefinition, match=f"name '{name}' cannot contain '-'"):
        StreamDefinition(name, "1.0.0")


def test_version_with_separator_is_rejected() -> None:
    with pytest.raises(MalformedStreamDefinition, match="version '1.0.0-SNAPSHOT' cannot contain"):
        StreamDefinition("Temperature", "1.0.0-SNAPSHOT")


@pytest.mark.parametrize("version", ["1.0", "1", "", "1.0.0.0", "v1.0.0", "1.a.0", "1.0.0 ", " 1.0.0"])
def test_version_format_is_enforced(version: str) -> None:
    with pytest.raises(MalformedStreamDefinition, match="does not adhere to the format x.x.x"):
        StreamDefinition("Temperature", version)


def test_name_is_checked_before_version() -> None:
    with pytest.raises(MalformedStreamDefinition, match="^name "):
        StreamDefinition("Temp-erature", "bad")


def test_name_only_form_skips_validation_and_defaults_version() -> None:
    d = StreamDefinition("Temp-erature")

    assert d.version == "1.0.0"
    assert d.stream_id == "Temp-erature-1.0.0"


def test_legacy_stream_id_argument_is_ignored() -> None:
    with pytest.warns(DeprecationWarning, match="stream_id is ignored"):
        d = StreamDefinition("Temperature", "2.1.0", "custom-id")

    assert d.stream_id == "Temperature-2.1.0"


def test_legacy_form_still_validates() -> None:
    with pytest.warns(DeprecationWarning):
        with pytest.raises(MalformedStreamDefinition):
            StreamDefinition("Temperature", "2.1", "Temperature-2.1")


def test_stream_id_is_read_only() -> None:
    d = StreamDefinition("Temperature", "1.0.0")

    with pytest.raises(AttributeError):
        d.stream_id = "other"  # type: ignore[misc]


def test_collections_absent_until_first_add() -> None:
    d = StreamDefinition("Temperature", "1.0.0")

    assert d.tags is None
    assert d.meta_data is None
    assert d.correlation_data is None
    assert d.payload_data is None

    d.add_tag("iot")
    d.add_tag("sensors")
    assert d.tags == ["iot", "sensors"]


def test_add_payload_data_twice_keeps_both_entries() -> None:
    d = StreamDefinition("Temperature", "1.0.0")
    assert d.attribute_list_for_key("payloadData") is None

    d.add_payload_data("value", AttributeType.DOUBLE)
    d.add_payload_data("value", AttributeType.DOUBLE)

    assert d.payload_data is not None
    assert len(d.payload_data) == 2
    assert d.payload_data[0] == d.payload_data[1] == Attribute("value", AttributeType.DOUBLE)
    assert d.attribute_list_for_key("payloadData") is d.payload_data


def test_add_accepts_type_names() -> None:
    d = StreamDefinition("Temperature", "1.0.0")
    d.add_meta_data("sensorId", "string")

    assert d.meta_data == [Attribute("sensorId", AttributeType.STRING)]


def test_add_rejects_unknown_type() -> None:
    d = StreamDefinition("Temperature", "1.0.0")

    with pytest.raises(MalformedStreamDefinition, match="attribute type must be one of"):
        d.add_payload_data("value", "decimal")


def test_lookup_by_key() -> None:
    d = _temperature()

    assert d.attribute_list_for_key("metaData") is d.meta_data
    assert d.attribute_list_for_key("correlationData") is d.correlation_data
    assert d.attribute_list_for_key("payloadData") is d.payload_data
    assert d.attribute_list_for_key(AttributeGroup.PAYLOAD_DATA) is d.payload_data


@pytest.mark.parametrize("key", ["foo", "payload_data", "PAYLOADDATA", ""])
def test_lookup_by_unknown_key_returns_none(key: str) -> None:
    assert _temperature().attribute_list_for_key(key) is None


def test_same_attribute_name_allowed_in_every_group() -> None:
    d = StreamDefinition("Temperature", "1.0.0")
    d.add_meta_data("id", AttributeType.STRING)
    d.add_correlation_data("id", AttributeType.STRING)
    d.add_payload_data("id", AttributeType.STRING)

    assert d.meta_data == d.correlation_data == d.payload_data


def test_equality_ignores_display_metadata() -> None:
    a = _temperature()
    b = _temperature()
    b.nick_name = "temp"
    b.description = "Room temperature"
    b.add_tag("iot")

    assert a == b
    assert hash(a) == hash(b)


def test_equality_requires_same_name_and_version() -> None:
    assert StreamDefinition("Temperature", "1.0.0") != StreamDefinition("Temperature", "1.0.1")
    assert StreamDefinition("Temperature", "1.0.0") != StreamDefinition("Humidity", "1.0.0")


def test_absent_group_equals_empty_group() -> None:
    a = StreamDefinition("Temperature", "1.0.0")
    b = StreamDefinition("Temperature", "1.0.0")
    b.meta_data = []
    b.correlation_data = []
    b.payload_data = []

    assert a == b
    assert b == a
    assert hash(a) == hash(b)


def test_attribute_order_is_significant() -> None:
    a = StreamDefinition("Temperature", "1.0.0")
    a.add_payload_data("value", AttributeType.DOUBLE)
    a.add_payload_data("unit", AttributeType.STRING)
    b = StreamDefinition("Temperature", "1.0.0")
    b.add_payload_data("unit", AttributeType.STRING)
    b.add_payload_data("value", AttributeType.DOUBLE)

    assert a != b


def test_groups_are_compared_independently() -> None:
    a = StreamDefinition("Temperature", "1.0.0")
    a.add_meta_data("value", AttributeType.DOUBLE)
    b = StreamDefinition("Temperature", "1.0.0")
    b.add_payload_data("value", AttributeType.DOUBLE)

    assert a != b


def test_equality_is_an_equivalence() -> None:
    a, b, c = _temperature(), _temperature(), _temperature()
    c.payload_data = list(c.payload_data or [])

    assert a == a
    assert (a == b) and (b == a)
    assert (a == b) and (b == c) and (a == c)


def test_equality_with_other_types() -> None:
    d = _temperature()

    assert d != "Temperature-1.0.0"
    assert d != None  # noqa: E711


def test_equal_definitions_deduplicate_in_sets() -> None:
    a = _temperature()
    b = _temperature()
    b.nick_name = "temp"

    assert len({a, b}) == 1


def test_str_renders_json_document() -> None:
    d = StreamDefinition("Temperature", "1.0.0")

    assert str(d) == '{"streamId":"Temperature-1.0.0","name":"Temperature","version":"1.0.0"}'
    assert repr(d) == "StreamDefinition(name='Temperature', version='1.0.0')"


def test_stream_id_is_stable_across_reads() -> None:
    d = StreamDefinition("Temperature", "1.0.0")
    d.nick_name = "temp"
    d.add_payload_data("value", AttributeType.DOUBLE)

    assert d.stream_id == d.stream_id == "Temperature-1.0.0"
