import json

import httpx
import pytest

from textsum.errors import (
    APIError,
    AuthenticationError,
    LLMResponseError,
    LLMTransportError,
)
from textsum.llm import OpenAIClient


def _client(handler, **kwargs):
    return OpenAIClient(
        api_key="sk-test",
        base_url="https://api.example.test/v1/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def _chat_reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def test_complete_posts_history_and_returns_content():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_chat_reply("a summary"))

    history = [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]
    result = _client(handler).complete(history, model="gpt-4-0613", temperature=0.2)

    assert result == "a summary"
    assert seen["url"] == "https://api.example.test/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"] == {
        "model": "gpt-4-0613",
        "messages": history,
        "temperature": 0.2,
        "top_p": 1,
        "n": 1,
    }


def test_generate_uses_default_model():
    def handler(request):
        body = json.loads(request.content)
        assert body["model"] == "gpt-4o-mini"
        assert body["messages"] == [{"role": "user", "content": "hi"}]
        assert "temperature" not in body
        return httpx.Response(200, json=_chat_reply("hello"))

    assert _client(handler).generate("hi") == "hello"


def test_null_content_becomes_empty_string():
    client = _client(lambda r: httpx.Response(200, json=_chat_reply(None)))
    assert client.generate("hi") == ""


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failures(status):
    client = _client(
        lambda r: httpx.Response(status, json={"error": {"message": "Incorrect API key"}})
    )
    with pytest.raises(AuthenticationError, match="Incorrect API key") as exc:
        client.generate("hi")
    assert exc.value.status_code == status


def test_server_error_raises_api_error():
    client = _client(lambda r: httpx.Response(500, text="oops"))
    with pytest.raises(APIError) as exc:
        client.generate("hi")
    assert exc.value.status_code == 500
    assert "HTTP 500 error" in str(exc.value)


def test_connection_error_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(LLMTransportError):
        _client(handler).generate("hi")


def test_missing_choices_raises_response_error():
    client = _client(lambda r: httpx.Response(200, json={"choices": []}))
    with pytest.raises(LLMResponseError):
        client.generate("hi")


def test_embed_returns_vector():
    def handler(request):
        assert request.url.path == "/v1/embeddings"
        assert json.loads(request.content) == {"input": "text", "model": "text-embedding-3-small"}
        return httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2, 3]}]})

    assert _client(handler).embed("text") == [0.1, 0.2, 3.0]


def test_embed_rejects_unknown_model():
    client = _client(lambda r: httpx.Response(200, json={}))
    with pytest.raises(ValueError, match="Invalid model"):
        client.embed("text", model="not-a-model")


def test_embed_warns_on_deprecated_model():
    client = _client(lambda r: httpx.Response(200, json={"data": [{"embedding": [1.0]}]}))
    with pytest.warns(DeprecationWarning):
        client.embed("text", model="text-embedding-ada-002")


def test_embed_without_data_raises():
    client = _client(lambda r: httpx.Response(200, json={"data": []}))
    with pytest.raises(LLMResponseError):
        client.embed("text")


def test_check_health():
    assert _client(lambda r: httpx.Response(200, json={"data": []})).check_health()
    assert not _client(lambda r: httpx.Response(401, json={})).check_health()


def test_list_models():
    client = _client(lambda r: httpx.Response(200, json={"data": [{"id": "gpt-4o-mini"}]}))
    assert client.list_models() == [{"id": "gpt-4o-mini"}]
