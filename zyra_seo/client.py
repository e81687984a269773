"""Generative text backend: the capability the engine depends on, plus an Anthropic adapter."""

import os
from dataclasses import dataclass
from typing import Protocol

import anthropic

from .config import REQUEST_TIMEOUT
from .errors import GenerationError

JSON_ONLY_INSTRUCTION = "\n\nRespond with a single JSON object only, no other text."


@dataclass
class CompletionOptions:
    model: str
    temperature: float
    max_tokens: int
    json_mode: bool = True


class GenerativeClient(Protocol):
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        options: CompletionOptions,
    ) -> str:
        """Return the raw text of the model's reply."""
        ...


class AnthropicClient:
    """
    GenerativeClient over the Anthropic Messages API.

    No retries: a failed call surfaces immediately and the caller owns retry
    policy. The timeout applies at the HTTP transport.
    """

    def __init__(self, api_key: str | None = None, timeout: float = REQUEST_TIMEOUT):
        api_key = api_key or os.getenv("ANTHROPIC_API_KEY")
        if not api_key:
            raise ValueError("ANTHROPIC_API_KEY not set.")

        self._client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        options: CompletionOptions,
    ) -> str:
        system = system_prompt + JSON_ONLY_INSTRUCTION if options.json_mode else system_prompt

        response = await self._client.messages.create(
            model=options.model,
            max_tokens=options.max_tokens,
            temperature=options.temperature,
            system=system,
            messages=[{"role": "user", "content": user_prompt}],
        )

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        ).strip()
        if not text:
            raise GenerationError("Empty response from model")
        return text
