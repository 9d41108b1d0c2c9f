"""Tests for the Outline API client."""

import json

import pytest
import requests

from outlinemd.adapters.outline_api import OutlineClient, update_payload
from outlinemd.errors import BadRequestError, OutlineError, UnexpectedResponseError


def make_response(status=200, body=None, content_type="application/json", reason="OK"):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.encoding = "utf-8"
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    resp._content = (body or "").encode("utf-8")
    if content_type:
        resp.headers["Content-Type"] = content_type
    return resp


class FakeSession:
    """Records posts and replays canned responses."""

    def __init__(self, *responses):
        self.headers = {}
        self.calls = []
        self.responses = list(responses)
        self.closed = False

    def close(self):
        self.closed = True

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def make_client(*responses):
    session = FakeSession(*responses)
    client = OutlineClient(
        "secret", base_url="https://docs.example.com/api/", timeout=5, session=session
    )
    return client, session


def test_client_sets_auth_header():
    """Test bearer token is sent with every request."""
    client, session = make_client()
    assert session.headers["Authorization"] == "Bearer secret"


def test_fetch_document():
    """Test documents.info response is unwrapped."""
    client, session = make_client(
        make_response(body={"data": {"title": "Guide", "text": "body"}})
    )
    doc = client.fetch_document("Ab12")

    assert doc.title == "Guide"
    assert doc.text == "body"
    assert session.calls == [{
        "url": "https://docs.example.com/api/documents.info",
        "json": {"id": "Ab12"},
        "timeout": 5,
    }]


def test_fetch_document_charset_content_type():
    """Test JSON content types with parameters are accepted."""
    client, _ = make_client(make_response(
        body={"data": {"title": "T", "text": ""}},
        content_type="application/json; charset=utf-8",
    ))
    assert client.fetch_document("Ab12").title == "T"


def test_update_document():
    """Test documents.update payload includes title when given."""
    client, session = make_client(make_response(body={"data": {}}))
    client.update_document("Ab12", "text", title="Guide")

    call = session.calls[0]
    assert call["url"] == "https://docs.example.com/api/documents.update"
    assert call["json"] == {"id": "Ab12", "title": "Guide", "text": "text"}


def test_update_payload_omits_empty_title():
    """Test empty title is left out of the payload."""
    assert update_payload("Ab12", "text") == {"id": "Ab12", "text": "text"}


def test_bad_request_error():
    """Test HTTP 400 with JSON body becomes BadRequestError."""
    body = '{"ok":false,"error":"validation_error"}'
    client, _ = make_client(make_response(status=400, body=body, reason="Bad Request"))

    with pytest.raises(BadRequestError) as exc:
        client.fetch_document("Ab12")
    assert exc.value.data == body
    assert str(exc.value) == f"Bad request: {body}"


def test_bad_request_without_json():
    """Test HTTP 400 with a non-JSON body is an unexpected status."""
    client, _ = make_client(make_response(status=400, body="nope", reason="Bad Request"))
    with pytest.raises(UnexpectedResponseError, match="unexpected status: 400 Bad Request"):
        client.fetch_document("Ab12")


def test_unexpected_status():
    """Test other non-200 statuses are reported."""
    client, _ = make_client(make_response(status=401, body={}, reason="Unauthorized"))
    with pytest.raises(UnexpectedResponseError, match="unexpected status: 401 Unauthorized"):
        client.update_document("Ab12", "text")


def test_unexpected_content_type():
    """Test non-JSON success responses are rejected."""
    client, _ = make_client(make_response(body="<html>", content_type="text/html"))
    with pytest.raises(UnexpectedResponseError, match="unexpected content-type: text/html"):
        client.fetch_document("Ab12")


def test_transport_error():
    """Test connection failures surface as OutlineError."""
    client, _ = make_client(requests.ConnectionError("connection refused"))
    with pytest.raises(OutlineError, match="connection refused"):
        client.fetch_document("Ab12")


def test_bad_request_error_message_without_data():
    """Test message when the server sent no details."""
    assert str(BadRequestError()) == "Bad request"


def test_fetch_document_null_fields():
    """Test null title and text come back as empty strings."""
    client, _ = make_client(make_response(body={"data": {"title": None, "text": None}}))
    doc = client.fetch_document("Ab12")
    assert doc.title == ""
    assert doc.text == ""


def test_client_closes_session():
    """Test the session is closed with the client."""
    client, session = make_client()
    with client:
        assert not session.closed
    assert session.closed
