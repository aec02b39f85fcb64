"""LLM interaction for scriptgen."""

import logging

import httpx
from pydantic import ValidationError

from scriptgen.errors import (
    EmptyGenerationError,
    EmptyReplyError,
    InferenceStatusError,
    InferenceUnavailableError,
    ReplyDecodeError,
)
from scriptgen.models import DEFAULT_ENDPOINT, DEFAULT_MODEL, GenerationReply, GenerationRequest

log = logging.getLogger(__name__)


class InferenceClient:
    """Single-shot, blocking client for an Ollama-style /api/generate endpoint."""

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        model: str = DEFAULT_MODEL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.model = model
        self._transport = transport

    def invoke(self, prompt: str) -> str:
        """Send prompt to the server and return the generated text."""
        request = GenerationRequest(model=self.model, prompt=prompt, stream=False)
        log.debug("POST %s model=%s prompt=%d chars", self.endpoint, self.model, len(prompt))

        # The server may take arbitrarily long to generate; wait for it.
        with httpx.Client(timeout=None, transport=self._transport) as client:
            try:
                response = client.post(
                    self.endpoint,
                    content=request.model_dump_json(),
                    headers={"Content-Type": "application/json"},
                )
            except httpx.TransportError as e:
                raise InferenceUnavailableError(self.endpoint, str(e) or type(e).__name__) from e
            except httpx.DecodingError as e:
                raise ReplyDecodeError(f"could not decode reply body: {e}") from e

        log.debug("response status: %d %s", response.status_code, response.reason_phrase)
        for key, value in response.headers.items():
            log.debug("response header %s: %s", key, value)
        log.debug("raw response body: %s", response.text)

        if not response.content:
            raise EmptyReplyError()
        body = response.text
        if not response.is_success:
            raise InferenceStatusError(response.status_code, body)

        try:
            reply = GenerationReply.model_validate_json(body)
        except ValidationError as e:
            raise ReplyDecodeError(f"could not decode reply: {e.errors()[0]['msg']}", body) from e

        log.debug("parsed reply: model=%s response=%r", reply.model, reply.response)
        if not reply.response:
            raise EmptyGenerationError(body)
        return reply.response
