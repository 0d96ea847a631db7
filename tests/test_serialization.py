"""Tests for JSON serialization of StackError chains."""

import json

import pytest
from pydantic import ValidationError

from errstack import StackError, StackErrorPayload


def test_to_json_shape():
    """Test serialized record has exactly the contract fields."""
    error = StackError("TEST0", "test")
    error.metadata = {"field": "name"}
    assert error.to_json() == {
        "code": "TEST0",
        "message": "test",
        "metadata": {"field": "name"},
        "name": "StackError",
        "stack": [],
    }


def test_to_json_flattens_chain_one_level(error_chain):
    """Test each chained entry is serialized with an empty stack."""
    _, _, third = error_chain
    data = third.to_json()
    assert [entry["code"] for entry in data["stack"]] == ["TEST2", "TEST1"]
    assert all(entry["stack"] == [] for entry in data["stack"])


def test_to_json_without_stack(error_chain):
    """Test with_stack=False drops the chain."""
    _, _, third = error_chain
    assert third.to_json(False)["stack"] == []


def test_round_trip(error_chain):
    """Test from_json(to_json()) rebuilds an equivalent error."""
    _, _, third = error_chain
    third.metadata = {"request": {"id": 42, "tags": ["a", "b"]}}
    clone = StackError.from_json(third.to_json())
    assert isinstance(clone, StackError)
    assert clone is not third
    assert clone.is_equivalent(third)


def test_round_trip_preserves_nested_chain_order(error_chain):
    """Test rebuilt chain entries wrap the entries after them."""
    _, _, third = error_chain
    clone = StackError.from_json(third.to_json())
    second, first = clone.error_stack
    assert [e.code for e in clone.to_error_stack()] == ["TEST3", "TEST2", "TEST1"]
    assert second.error_stack == [first]
    assert first.error_stack == []


def test_round_trip_through_json_document(error_chain):
    """Test from_json accepts a JSON string."""
    _, _, third = error_chain
    clone = StackError.from_json(third.to_json_string())
    assert clone.is_equivalent(third)


def test_round_trip_through_payload(error_chain):
    """Test from_json accepts a validated payload model."""
    _, _, third = error_chain
    payload = StackErrorPayload.model_validate(third.to_json())
    assert StackError.from_json(payload).is_equivalent(third)


def test_round_trip_keeps_name():
    """Test a custom name survives the round-trip."""
    error = StackError("TEST0", "test")
    error.name = "ProtocolError"
    assert StackError.from_json(error.to_json()).name == "ProtocolError"


def test_from_json_minimal_record():
    """Test missing metadata, name and stack fall back to defaults."""
    error = StackError.from_json({"code": "TEST0", "message": "test"})
    assert error.metadata == {}
    assert error.name == "StackError"
    assert error.error_stack == []


def test_from_json_null_fields_default():
    """Test explicit nulls for metadata, name and stack count as missing."""
    record = json.loads(
        '{"code": "A", "message": "m", "metadata": null, "name": null, "stack": null}'
    )
    error = StackError.from_json(record)
    assert error.code == "A"
    assert error.metadata == {}
    assert error.name == "StackError"
    assert error.error_stack == []


def test_from_json_null_fields_in_chain():
    """Test nulls inside chained entries are defaulted too."""
    error = StackError.from_json(
        {
            "code": "A",
            "message": "outer",
            "stack": [{"code": "B", "message": "inner", "metadata": None, "stack": None}],
        }
    )
    assert error.error_stack[0].metadata == {}
    assert error.error_stack[0].error_stack == []


def test_from_json_missing_code():
    """Test a record without code is rejected."""
    with pytest.raises(ValidationError):
        StackError.from_json({"message": "test"})


def test_from_json_invalid_document():
    """Test malformed JSON is rejected as a ValueError."""
    with pytest.raises(ValueError):
        StackError.from_json("{not json")


def test_round_trip_drops_diagnostic_trace():
    """Test the diagnostic trace is not serialized."""
    error = StackError("TEST0", "test")
    error.diagnostic_trace = "trace"
    data = error.to_json()
    assert "trace" not in json.dumps(data)
    assert StackError.from_json(data).diagnostic_trace is None
