import json

import pytest

from errors import BadRequest, MethodNotAllowed
from validation import validate_chat_request


def test_validate_valid_payload():
    req = validate_chat_request('POST', json.dumps({"message": "  hello  "}).encode())
    assert req.message == "hello"


def test_method_is_case_insensitive():
    req = validate_chat_request('post', b'{"message": "hi"}')
    assert req.message == "hi"


@pytest.mark.parametrize('method', ['GET', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS'])
def test_non_post_rejected(method):
    with pytest.raises(MethodNotAllowed):
        validate_chat_request(method, b'{"message": "hi"}')


def test_method_checked_before_body():
    # a bad body must not turn a 405 into a 400
    with pytest.raises(MethodNotAllowed):
        validate_chat_request('GET', b'not json')


@pytest.mark.parametrize('body', [
    None,
    b'',
    b'not json',
    b'[]',
    b'"hello"',
    b'{}',
    b'{"message": ""}',
    b'{"message": "   "}',
    b'{"message": null}',
    b'{"message": 42}',
])
def test_invalid_bodies_rejected(body):
    with pytest.raises(BadRequest) as info:
        validate_chat_request('POST', body)
    assert info.value.status_code == 400
    assert info.value.to_dict()['error'] == 'Message is required'


def test_schema_violation_reported_in_details():
    with pytest.raises(BadRequest) as info:
        validate_chat_request('POST', b'{"text": "hi"}')
    assert "'message' is a required property" in info.value.details
