"""Unit tests for tolerant JSON decoding."""

import pytest

from app.utils.safe_json import safe_json


class FakeResponse:
    def __init__(self, text):
        self.text = text


@pytest.mark.parametrize("body", [None, "", "   \n\t", b"", b"  "])
def test_empty_body_decodes_to_empty_dict(body):
    assert safe_json(body) == {}


@pytest.mark.parametrize("body", ["{", "not json", "{'single': 'quotes'}", b"\xff\xfe"])
def test_malformed_body_decodes_to_empty_dict(body):
    assert safe_json(body) == {}


def test_valid_body_is_parsed_faithfully():
    assert safe_json('{"ok": true, "items": [1, 2]}') == {"ok": True, "items": [1, 2]}
    assert safe_json(b'[1, "two", null]') == [1, "two", None]
    assert safe_json("42") == 42


def test_response_objects_are_read_through_text():
    assert safe_json(FakeResponse('{"threadId": null}')) == {"threadId": None}
    assert safe_json(FakeResponse("")) == {}


def test_deeply_nested_body_decodes_to_empty_dict():
    assert safe_json("[" * 100_000) == {}
    assert safe_json(b"[" * 100_000 + b"]" * 100_000) == {}


@pytest.mark.parametrize("text", [123, None, ["not", "text"]])
def test_response_with_non_text_body_decodes_to_empty_dict(text):
    assert safe_json(FakeResponse(text)) == {}
