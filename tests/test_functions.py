"""
Tests for the serverless function handlers.
"""

import base64
import json
from unittest.mock import Mock, patch

import pytest

from contactform.core.errors import SendError
from contactform.functions import contact as contact_function
from contactform.functions import health as health_function
from contactform.functions.runtime import get_body, get_header


@pytest.fixture
def lambda_context():
    """Mock function context."""
    context = Mock()
    context.aws_request_id = "test-request-id"
    return context


@pytest.fixture
def doubles(store, sender):
    with patch.object(contact_function, "store", store), patch.object(contact_function, "sender", sender):
        yield store, sender


def make_event(method="POST", body=None, origin=None, header_name="origin", base64_encoded=False):
    headers = {header_name: origin} if origin else {}
    if body is not None and base64_encoded:
        body = base64.b64encode(body.encode("utf-8")).decode("ascii")
    return {"httpMethod": method, "headers": headers, "body": body, "isBase64Encoded": base64_encoded}


class TestContactFunction:

    def test_success(self, doubles, payload, lambda_context):
        store, sender = doubles
        event = make_event(body=json.dumps(payload), origin="http://localhost:3000")

        response = contact_function.handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["success"] is True
        assert response["headers"]["Access-Control-Allow-Origin"] == "http://localhost:3000"
        store.try_save.assert_awaited_once()
        sender.send.assert_awaited_once()

    def test_capitalized_origin_header(self, doubles, payload, lambda_context):
        event = make_event(body=json.dumps(payload), origin="https://covechildcare.co.uk", header_name="Origin")

        response = contact_function.handler(event, lambda_context)

        assert response["headers"]["Access-Control-Allow-Origin"] == "https://covechildcare.co.uk"

    def test_base64_body(self, doubles, payload, lambda_context):
        event = make_event(body=json.dumps(payload), base64_encoded=True)
        assert contact_function.handler(event, lambda_context)["statusCode"] == 200

    def test_preflight(self, doubles, lambda_context):
        response = contact_function.handler(make_event(method="OPTIONS"), lambda_context)

        assert response["statusCode"] == 204
        assert response["body"] == ""
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_get_not_allowed(self, doubles, lambda_context):
        response = contact_function.handler(make_event(method="GET"), lambda_context)

        assert response["statusCode"] == 405
        assert json.loads(response["body"]) == {"success": False, "message": "Method not allowed"}

    def test_missing_body(self, doubles, lambda_context):
        store, sender = doubles
        response = contact_function.handler(make_event(body=None), lambda_context)

        assert response["statusCode"] == 400
        store.try_save.assert_not_awaited()

    def test_decoded_object_body(self, doubles, payload, lambda_context):
        store, sender = doubles
        event = {"httpMethod": "POST", "headers": {}, "body": payload}

        response = contact_function.handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert store.try_save.await_args.args[0].email == "ann@x.com"

    @pytest.mark.parametrize("event", [
        {"httpMethod": "POST", "headers": {}, "body": 42},
        {"httpMethod": "POST", "headers": {}, "body": 42, "isBase64Encoded": True},
        {"httpMethod": "POST", "headers": ["origin"], "body": "{}"},
        {"httpMethod": 7, "headers": {"origin": 1}, "body": None},
    ])
    def test_malformed_event_gets_response(self, doubles, lambda_context, event):
        store, sender = doubles

        response = contact_function.handler(event, lambda_context)

        assert response["statusCode"] in (400, 405)
        assert json.loads(response["body"])["success"] is False
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        store.try_save.assert_not_awaited()
        sender.send.assert_not_awaited()

    def test_both_fail(self, doubles, payload, lambda_context):
        store, sender = doubles
        store.try_save.return_value = False
        sender.send.side_effect = SendError("timeout")

        response = contact_function.handler(make_event(body=json.dumps(payload)), lambda_context)

        assert response["statusCode"] == 500

    def test_warm_invocations_reuse_event_loop(self, doubles, payload, lambda_context):
        import asyncio

        loops = []

        async def record_loop(submission):
            loops.append(asyncio.get_running_loop())
            return True

        store, sender = doubles
        store.try_save.side_effect = record_loop
        event = make_event(body=json.dumps(payload))

        contact_function.handler(event, lambda_context)
        contact_function.handler(event, lambda_context)

        assert len(loops) == 2
        assert loops[0] is loops[1]


class TestHealthFunction:

    def test_health(self, lambda_context):
        response = health_function.handler({"httpMethod": "GET", "headers": {}}, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"status": "ok"}
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

    def test_preflight(self, lambda_context):
        event = {"httpMethod": "OPTIONS", "headers": {"Origin": "http://localhost:5173"}}
        response = health_function.handler(event, lambda_context)

        assert response["statusCode"] == 204
        assert response["headers"]["Access-Control-Allow-Origin"] == "http://localhost:5173"


class TestRuntimeHelpers:

    def test_get_header_is_case_insensitive(self):
        assert get_header({"headers": {"ORIGIN": "x"}}, "origin") == "x"
        assert get_header({"headers": None}, "origin") is None

    def test_invalid_base64_body_is_dropped(self):
        assert get_body({"body": "!!!not base64!!!", "isBase64Encoded": True}) is None

    def test_non_text_bodies(self):
        assert get_body({"body": {"name": "Ann"}}) == '{"name": "Ann"}'
        assert get_body({"body": b"raw"}) == "raw"
        assert get_body({"body": 3.5}) is None
