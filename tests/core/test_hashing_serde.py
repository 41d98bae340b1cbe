import json

import pytest

from databridge.core.attribute import Attribute, AttributeType
from databridge.core.definition import StreamDefinition
from databridge.core.errors import MalformedStreamDefinition, StreamDefinitionConversionError
from databridge.core.hashing import json_dumps_canonical, schema_fingerprint
from databridge.core.serde import from_dict, from_json, to_dict, to_json


def _full() -> StreamDefinition:
    d = StreamDefinition("Temperature", "1.2.3")
    d.nick_name = "temp"
    d.description = "Room temperature 🙂"
    d.add_tag("iot")
    d.add_meta_data("sensorId", AttributeType.STRING)
    d.add_correlation_data("traceId", AttributeType.LONG)
    d.add_payload_data("value", AttributeType.DOUBLE)
    d.add_payload_data("ok", AttributeType.BOOL)
    return d


def test_to_dict_document_shape() -> None:
    doc = to_dict(_full())

    assert list(doc) == [
        "streamId",
        "name",
        "version",
        "nickName",
        "description",
        "metaData",
        "correlationData",
        "payloadData",
        "tags",
    ]
    assert doc["streamId"] == "Temperature-1.2.3"
    assert doc["payloadData"] == [
        {"name": "value", "type": "DOUBLE"},
        {"name": "ok", "type": "BOOL"},
    ]


def test_to_dict_omits_absent_but_keeps_empty() -> None:
    d = StreamDefinition("Temperature", "1.0.0")
    d.meta_data = []

    assert to_dict(d) == {
        "streamId": "Temperature-1.0.0",
        "name": "Temperature",
        "version": "1.0.0",
        "metaData": [],
    }


def test_json_roundtrip_preserves_everything() -> None:
    original = _full()
    back = from_json(to_json(original, indent=2))

    assert back == original
    assert back.stream_id == original.stream_id
    assert back.nick_name == "temp"
    assert back.description == "Room temperature 🙂"
    assert back.tags == ["iot"]
    assert back.payload_data == [
        Attribute("value", AttributeType.DOUBLE),
        Attribute("ok", AttributeType.BOOL),
    ]


def test_to_json_keeps_unicode() -> None:
    assert "🙂" in to_json(_full())


def test_from_dict_defaults_version() -> None:
    d = from_dict({"name": "Temperature"})

    assert d.version == "1.0.0"
    assert d.stream_id == "Temperature-1.0.0"
    assert d.payload_data is None


def test_from_dict_ignores_supplied_stream_id(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING", logger="databridge.core.serde"):
        d = from_dict({"streamId": "custom", "name": "Temperature", "version": "1.0.0"})

    assert d.stream_id == "Temperature-1.0.0"
    assert "discarding supplied streamId" in caplog.text


def test_from_dict_accepts_lower_case_types() -> None:
    d = from_dict({"name": "T", "version": "1.0.0", "payloadData": [{"name": "v", "type": "int"}]})

    assert d.payload_data == [Attribute("v", AttributeType.INT)]


def test_from_dict_validates_identity() -> None:
    with pytest.raises(MalformedStreamDefinition, match="x.x.x"):
        from_dict({"name": "Temperature", "version": "1.0"})
    with pytest.raises(MalformedStreamDefinition, match="cannot contain"):
        from_dict({"name": "Temp-erature", "version": "1.0.0"})


@pytest.mark.parametrize(
    "doc",
    [
        {},
        {"name": ""},
        {"name": "T", "unknown": 1},
        {"name": "T", "payloadData": [{"name": "v"}]},
        {"name": "T", "payloadData": [{"name": "v", "type": "decimal"}]},
        ["not", "a", "mapping"],
    ],
)
def test_from_dict_rejects_bad_documents(doc: object) -> None:
    with pytest.raises(StreamDefinitionConversionError, match="invalid stream definition document"):
        from_dict(doc)


def test_from_json_rejects_invalid_json() -> None:
    with pytest.raises(StreamDefinitionConversionError, match="invalid JSON"):
        from_json("{name: ")


def test_json_dumps_canonical_sorted() -> None:
    assert json_dumps_canonical({"b": 1, "a": [2]}) == '{"a":[2],"b":1}'
    assert json.loads(json_dumps_canonical({"x": "🙂"})) == {"x": "🙂"}


def test_fingerprint_agrees_with_equality() -> None:
    a = _full()
    b = _full()
    b.nick_name = "other"
    b.tags = None

    assert a == b
    assert schema_fingerprint(a) == schema_fingerprint(b)

    b.add_payload_data("extra", AttributeType.STRING)
    assert schema_fingerprint(a) != schema_fingerprint(b)


def test_fingerprint_absent_equals_empty() -> None:
    a = StreamDefinition("Temperature", "1.0.0")
    b = StreamDefinition("Temperature", "1.0.0")
    b.correlation_data = []

    assert schema_fingerprint(a) == schema_fingerprint(b)
