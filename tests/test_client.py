"""
Anthropic adapter tests (no network: the SDK client is swapped for a stub)
"""
import asyncio
from types import SimpleNamespace

import pytest

from zyra_seo.client import JSON_ONLY_INSTRUCTION, AnthropicClient, CompletionOptions
from zyra_seo.errors import GenerationError


class StubMessages:
    def __init__(self, content):
        self.content = content
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        return SimpleNamespace(content=self.content)


def make_client(content):
    client = AnthropicClient(api_key="test-key")
    messages = StubMessages(content)
    client._client = SimpleNamespace(messages=messages)
    return client, messages


OPTIONS = CompletionOptions(model="test-model", temperature=0.4, max_tokens=1500)


class TestAnthropicClient:
    """Test AnthropicClient"""

    def test_builds_sdk_client(self):
        client = AnthropicClient(api_key="test-key", timeout=30.0)
        assert client._client.timeout == 30.0
        assert client._client.max_retries == 0

    def test_requires_api_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(ValueError, match="ANTHROPIC_API_KEY"):
            AnthropicClient()

    def test_request_shape(self):
        client, messages = make_client([SimpleNamespace(type="text", text='{"ok": true}')])
        text = asyncio.run(client.complete("system", "user", OPTIONS))

        assert text == '{"ok": true}'
        assert messages.kwargs["model"] == "test-model"
        assert messages.kwargs["temperature"] == 0.4
        assert messages.kwargs["max_tokens"] == 1500
        assert messages.kwargs["system"] == "system" + JSON_ONLY_INSTRUCTION
        assert messages.kwargs["messages"] == [{"role": "user", "content": "user"}]

    def test_plain_text_mode(self):
        client, messages = make_client([SimpleNamespace(type="text", text="hello")])
        options = CompletionOptions(model="m", temperature=0.1, max_tokens=10, json_mode=False)
        asyncio.run(client.complete("system", "user", options))
        assert messages.kwargs["system"] == "system"

    def test_text_blocks_joined(self):
        client, _ = make_client(
            [
                SimpleNamespace(type="text", text='{"a": '),
                SimpleNamespace(type="tool_use", input={}),
                SimpleNamespace(type="text", text="1}"),
            ]
        )
        assert asyncio.run(client.complete("s", "u", OPTIONS)) == '{"a": 1}'

    def test_empty_reply(self):
        client, _ = make_client([])
        with pytest.raises(GenerationError, match="Empty response"):
            asyncio.run(client.complete("s", "u", OPTIONS))
