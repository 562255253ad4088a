import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from fastapi.testclient import TestClient

import httpjson
from httpjson.client import Client, ResponseError, UnsupportedContentTypeError
from httpjson.errors import UnknownCharsetError
from httpjson.main import app
from httpjson.models import Message

errors_app = FastAPI()


@errors_app.post("/latin1-error")
def latin1_error():
    return Response(b"\xa3\n", status_code=500, media_type="text/plain;charset=iso-8859-1")


@errors_app.post("/empty-error")
def empty_error():
    return Response(status_code=500)


@errors_app.post("/not-json")
def not_json():
    return PlainTextResponse("not JSON content")


@pytest.fixture
def client():
    return Client(http_client=TestClient(app))


@pytest.fixture
def errors_client():
    return Client(http_client=TestClient(errors_app))


def test_do(client):
    resp = client.do("POST", "http://testserver/echo", "", Message(s="test message ☺"))
    assert resp == {"s": "test message ☺"}


@pytest.mark.parametrize("charset", ["us-ascii", "iso-8859-1", "shift_jis", "utf-16"])
def test_do_charsets(client, charset):
    resp = client.do(
        "POST",
        "http://testserver/echo",
        f"application/json;charset={charset}",
        Message(s="test message ☺ é"),
        model=Message,
    )
    assert resp == Message(s="test message ☺ é")


def test_do_marshal_error(client):
    with pytest.raises(UnknownCharsetError, match="invalid encoding name"):
        client.do("POST", "http://testserver/echo", "application/json;charset=made-up", Message(s="x"))


def test_do_not_found(client):
    with pytest.raises(ResponseError) as exc_info:
        client.do("POST", "http://testserver/no-such-route", "", Message(s="x"))
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "404 Not Found"
    assert exc_info.value.body == b"{\"detail\":\"Not Found\"}"


def test_do_server_charset_error_message(client):
    with pytest.raises(ResponseError) as exc_info:
        client.get("http://testserver/message?s=x&charset=OSD_EBCDIC_DF03_IRV")
    assert exc_info.value.status_code == 415
    assert str(exc_info.value) == "unsupported encoding: 'OSD_EBCDIC_DF03_IRV'"


def test_do_response_error_charset(errors_client):
    with pytest.raises(ResponseError) as exc_info:
        errors_client.do("POST", "http://testserver/latin1-error", "", Message(s="x"))
    assert str(exc_info.value) == "£"


def test_do_response_error_no_message(errors_client):
    with pytest.raises(ResponseError) as exc_info:
        errors_client.do("POST", "http://testserver/empty-error", "", Message(s="x"))
    assert str(exc_info.value) == "500 Internal Server Error"


def test_do_bad_content_type(errors_client):
    with pytest.raises(UnsupportedContentTypeError) as exc_info:
        errors_client.do("POST", "http://testserver/not-json", "", Message(s="x"))
    assert str(exc_info.value) == "unsupported Content-Type \"text/plain; charset=utf-8\""


def test_do_custom_content_type():
    client = Client(
        http_client=TestClient(app),
        is_json_content_type=lambda content_type: content_type == "x-application/test;charset=utf-8",
    )
    resp = client.do("POST", "http://testserver/echo", "x-application/test;charset=utf-8", Message(s="test message ☺"))
    assert resp == {"s": "test message ☺"}


def test_get(client):
    resp = client.get("http://testserver/message?s=test+message+%E2%98%BA", model=Message)
    assert resp == Message(s="test message ☺")


def test_get_legacy_charset(client):
    resp = client.get("http://testserver/message?s=%C2%A3%E2%98%BA&charset=iso-8859-1")
    assert resp == {"s": "£☺"}


def test_module_level_helpers(monkeypatch):
    monkeypatch.setattr(httpjson.client, "DEFAULT_CLIENT", Client(http_client=TestClient(app)))
    assert httpjson.get("http://testserver/message?s=hi") == {"s": "hi"}
    assert httpjson.do("POST", "http://testserver/echo", "", [1, "☺"]) == [1, "☺"]


def test_owned_http_client_is_closed():
    client = Client()
    http_client = client.http_client
    with client:
        assert client.http_client is http_client
    assert http_client.is_closed


def test_borrowed_http_client_is_left_open():
    http_client = TestClient(app)
    with Client(http_client=http_client):
        pass
    assert not http_client.is_closed
