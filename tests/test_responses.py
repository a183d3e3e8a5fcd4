from apiscribe.responses import (
    AcceptedJson,
    CreatedJson,
    NoContent,
    OKJson,
    response_from_schema,
)

TEST_REF = {"$ref": "#/components/schemas/Test"}
TEST_SCHEMA = {"title": "Test", "type": "object", "properties": {"test": {"type": "string"}}}


def test_no_content_generate_valid_response():
    responses = NoContent().responses(None)
    assert "204" in responses
    assert responses["204"] == {"description": ""}


def test_no_content_respond():
    status, headers, body = NoContent().respond()
    assert status == 204
    assert headers["content-type"] == "application/json"
    assert body == b""


def test_accepted_json_generate_valid_response():
    responses = AcceptedJson({"test": "x"}, schema=("Test", TEST_REF)).responses(None)
    assert responses is not None
    assert "202" in responses


def test_created_json_generate_valid_response():
    responses = CreatedJson({"test": "x"}, schema=("Test", TEST_REF)).responses(None)
    assert responses is not None
    assert "201" in responses


def test_reference_schema_becomes_response_reference():
    responses = OKJson({}, schema=("Test", TEST_REF)).responses()
    assert responses == {"200": {"$ref": "#/components/schemas/Test"}}


def test_object_schema_becomes_json_content():
    responses = CreatedJson({}, schema=("Test", TEST_SCHEMA)).responses()
    assert responses["201"]["content"]["application/json"]["schema"] == TEST_SCHEMA
    assert responses["201"]["description"] == ""


def test_raw_schema_used_when_no_named_schema():
    raw = {"type": "array", "items": TEST_REF}
    responses = CreatedJson([], raw_schema=raw).responses()
    assert responses["201"]["content"]["application/json"]["schema"] == raw


def test_no_schema_gives_no_responses():
    assert OKJson({"a": 1}).responses() is None
    assert response_from_schema(200, None) is None


def test_json_respond_serializes_compactly():
    status, headers, body = OKJson({"a": 1, "b": [1, 2]}).respond()
    assert status == 200
    assert headers["content-type"] == "application/json"
    assert body == b'{"a":1,"b":[1,2]}'


def test_json_respond_statuses():
    assert AcceptedJson(1).respond()[0] == 202
    assert CreatedJson(1).respond()[0] == 201


def test_unserializable_body_gives_server_error():
    status, _headers, body = OKJson({1, 2}).respond()
    assert status == 500
    assert body


def test_child_schemas_are_copied():
    children = [("Test", TEST_SCHEMA)]
    response = OKJson({}, children=children)
    result = response.child_schemas()
    assert result == children
    result.append(("Other", {}))
    assert response.child_schemas() == children