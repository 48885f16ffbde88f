"""OpenAI chat-completions client over httpx."""

import logging
from dataclasses import dataclass

import httpx

from picngo.errors import (
    HttpStatusError,
    MalformedResponseError,
    TransportFailureError,
)
from picngo.services.analysis import InferenceClient, require_credential
from picngo.services.decoding import strip_code_fences

_logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o"
DEFAULT_TIMEOUT_SECONDS = 60.0


@dataclass
class HttpxChatCompletionsClient(InferenceClient):
    """Chat-completions client issuing one POST per call, without retries."""

    http_client: httpx.AsyncClient
    api_url: str = DEFAULT_API_URL
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def create(
        cls,
        api_url: str = DEFAULT_API_URL,
        model: str = DEFAULT_MODEL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "HttpxChatCompletionsClient":
        """Create a client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(),
            api_url=api_url,
            model=model,
            timeout_seconds=timeout_seconds,
        )

    async def complete(
        self,
        messages: list[dict[str, object]],
        api_key: str,
        max_tokens: int,
    ) -> str:
        """Send the messages and return the cleaned text of the first choice."""
        require_credential(api_key)
        payload = {
            "model": self.model,
            "max_tokens": max_tokens,
            "messages": messages,
        }
        _logger.debug(
            "Chat completion request: model=%s max_tokens=%s messages=%s",
            self.model,
            max_tokens,
            len(messages),
        )
        try:
            response = await self.http_client.post(
                self.api_url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {api_key}",
                },
                timeout=self.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            _logger.warning("Chat completion timed out after %ss", self.timeout_seconds)
            raise TransportFailureError("the request timed out") from exc
        except httpx.DecodingError as exc:
            _logger.warning("Chat completion body could not be decoded: %s", exc)
            raise MalformedResponseError() from exc
        except httpx.RequestError as exc:
            _logger.warning("Chat completion transport error: %s", exc)
            raise TransportFailureError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            server_message = _error_message(response)
            _logger.warning(
                "Chat completion failed: status=%s message=%s",
                response.status_code,
                server_message,
            )
            raise HttpStatusError(response.status_code, server_message)

        return strip_code_fences(_extract_content(response))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _error_message(response: httpx.Response) -> str | None:
    """Return ``error.message`` from an error body, if present."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) else None


def _extract_content(response: httpx.Response) -> str:
    """Return ``choices[0].message.content`` or raise MalformedResponseError."""
    try:
        body = response.json()
    except ValueError as exc:
        raise MalformedResponseError() from exc
    if not isinstance(body, dict):
        raise MalformedResponseError()
    choices = body.get("choices")
    if not isinstance(choices, list) or not choices:
        raise MalformedResponseError()
    first_choice = choices[0]
    if not isinstance(first_choice, dict):
        raise MalformedResponseError()
    message = first_choice.get("message")
    if not isinstance(message, dict):
        raise MalformedResponseError()
    content = message.get("content")
    if not isinstance(content, str):
        raise MalformedResponseError()
    return content
