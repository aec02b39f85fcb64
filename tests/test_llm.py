"""Unit tests for scriptgen.llm."""

import httpx
import pytest

from scriptgen.errors import (
    EmptyGenerationError,
    EmptyReplyError,
    InferenceStatusError,
    InferenceUnavailableError,
    ReplyDecodeError,
)
from scriptgen.llm import InferenceClient
from scriptgen.models import DEFAULT_ENDPOINT, DEFAULT_MODEL

from stub_server import StubServer, generation


class TestRequest:
    def test_posts_json_request_to_endpoint(self):
        server = StubServer(generation("COMMAND: ls"))
        server.client().invoke("list files please")

        request = server.requests[0]
        assert request.method == "POST"
        assert str(request.url) == DEFAULT_ENDPOINT
        assert request.headers["content-type"] == "application/json"
        assert server.payloads == [
            {"model": DEFAULT_MODEL, "prompt": "list files please", "stream": False}
        ]

    def test_custom_model_and_endpoint(self):
        server = StubServer(generation("ok"))
        client = InferenceClient(
            endpoint="http://gpu-box:11434/api/generate",
            model="codellama",
            transport=httpx.MockTransport(server.handler),
        )
        client.invoke("p")

        assert str(server.requests[0].url) == "http://gpu-box:11434/api/generate"
        assert server.payloads[0]["model"] == "codellama"

    def test_single_request_per_invoke(self):
        server = StubServer(generation("ok"), generation("unused"))
        server.client().invoke("p")
        assert len(server.requests) == 1


class TestReply:
    def test_returns_response_text(self):
        server = StubServer(generation("Explanation...\nCOMMAND: ls -la\n"))
        assert server.client().invoke("p") == "Explanation...\nCOMMAND: ls -la\n"

    def test_extra_reply_fields_are_ignored(self):
        body = {"model": "x", "created_at": "now", "response": "hi", "done": True}
        server = StubServer(httpx.Response(200, json=body))
        assert server.client().invoke("p") == "hi"

    def test_empty_body_raises_empty_reply(self):
        server = StubServer(httpx.Response(200, content=b""))
        with pytest.raises(EmptyReplyError):
            server.client().invoke("p")

    def test_empty_response_field_raises_empty_generation(self):
        server = StubServer(generation(""))
        with pytest.raises(EmptyGenerationError) as exc_info:
            server.client().invoke("p")
        assert '"response":""' in exc_info.value.body.replace(" ", "")

    def test_missing_response_field_raises_empty_generation(self):
        server = StubServer(httpx.Response(200, json={"model": "x"}))
        with pytest.raises(EmptyGenerationError):
            server.client().invoke("p")

    def test_null_response_field_raises_empty_generation(self):
        server = StubServer(httpx.Response(200, json={"model": None, "response": None}))
        with pytest.raises(EmptyGenerationError):
            server.client().invoke("p")

    def test_undecodable_content_encoding_raises_decode_error(self):
        broken = httpx.Response(
            200,
            headers={"Content-Encoding": "gzip"},
            stream=httpx.ByteStream(b"definitely not gzip"),
        )
        server = StubServer(broken)
        with pytest.raises(ReplyDecodeError, match="could not decode reply body"):
            server.client().invoke("p")

    def test_invalid_json_raises_decode_error_with_body(self):
        server = StubServer(httpx.Response(200, content=b"<html>oops</html>"))
        with pytest.raises(ReplyDecodeError) as exc_info:
            server.client().invoke("p")
        assert exc_info.value.body == "<html>oops</html>"
        assert "<html>oops</html>" in str(exc_info.value)

    def test_non_object_json_raises_decode_error(self):
        server = StubServer(httpx.Response(200, json=["COMMAND: ls"]))
        with pytest.raises(ReplyDecodeError):
            server.client().invoke("p")

    def test_wrong_field_type_raises_decode_error(self):
        server = StubServer(httpx.Response(200, json={"model": "x", "response": 42}))
        with pytest.raises(ReplyDecodeError):
            server.client().invoke("p")

    def test_error_status_raises_status_error(self):
        server = StubServer(httpx.Response(404, json={"error": "model 'llama3.2' not found"}))
        with pytest.raises(InferenceStatusError) as exc_info:
            server.client().invoke("p")
        assert exc_info.value.status_code == 404
        assert "not found" in str(exc_info.value)

    def test_empty_body_checked_before_status(self):
        server = StubServer(httpx.Response(500, content=b""))
        with pytest.raises(EmptyReplyError):
            server.client().invoke("p")


class TestTransport:
    def test_connection_refused_raises_unavailable(self):
        server = StubServer(httpx.ConnectError("Connection refused"))
        with pytest.raises(InferenceUnavailableError) as exc_info:
            server.client().invoke("p")
        assert exc_info.value.endpoint == DEFAULT_ENDPOINT
        assert "Connection refused" in str(exc_info.value)

    def test_no_retry_after_transport_failure(self):
        server = StubServer(httpx.ConnectError("down"), generation("COMMAND: ls"))
        with pytest.raises(InferenceUnavailableError):
            server.client().invoke("p")
        assert len(server.requests) == 1
