"""
OpenAI Client - chat completions and embeddings.

Synchronous on purpose: the summarization pipeline processes one block
at a time and waits for each answer.
"""

import warnings
from typing import Any, Dict, List, Optional

import httpx

from ..errors import (
    APIError,
    AuthenticationError,
    LLMError,
    LLMResponseError,
    LLMTransportError,
)
from ..logger_config import get_logger

logger = get_logger(__name__)

EMBEDDING_MODELS = (
    "text-embedding-3-small",
    "text-embedding-3-large",
    "text-embedding-ada-002",
)
DEPRECATED_EMBEDDING_MODELS = ("text-embedding-ada-002",)


class OpenAIClient:
    """Simple client for an OpenAI-compatible API."""

    def __init__(
        self,
        api_key: str = "",
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: int = 120,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, headers=self._headers(), json=payload)
        except httpx.TransportError as e:
            logger.error("Request to %s failed: %s", url, e)
            raise LLMTransportError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            message = _error_message(response)
            logger.error("API error %s from %s: %s", response.status_code, path, message)
            if response.status_code in (401, 403):
                raise AuthenticationError(message, response.status_code)
            raise APIError(f"API error ({response.status_code}): {message}", response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise LLMResponseError(f"Invalid JSON from {path}") from e
        if not isinstance(data, dict):
            raise LLMResponseError(f"Unexpected response body from {path}")
        return data

    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Send a chat history and return the assistant's text."""
        body: Dict[str, Any] = {
            "model": model or self.model,
            "messages": messages,
            "top_p": 1,
            "n": 1,
        }
        if temperature is not None:
            body["temperature"] = temperature

        data = self._request("POST", "/chat/completions", body)

        choices = data.get("choices") or []
        if not choices:
            raise LLMResponseError("Unexpected API response format: no choices")
        message = choices[0].get("message") or {}
        return message.get("content") or ""

    def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        """Generate text from a single user prompt."""
        return self.complete(
            [{"role": "user", "content": prompt}],
            model=model,
            temperature=temperature,
        )

    def embed(self, text: str, model: str = "text-embedding-3-small") -> List[float]:
        """Return the embedding vector for `text`."""
        if model not in EMBEDDING_MODELS:
            raise ValueError(
                "Invalid model. Choose from: " + ", ".join(EMBEDDING_MODELS)
            )
        if model in DEPRECATED_EMBEDDING_MODELS:
            warnings.warn(
                f"Model '{model}' is deprecated. Consider using "
                "'text-embedding-3-small' or 'text-embedding-3-large'.",
                DeprecationWarning,
                stacklevel=2,
            )

        data = self._request("POST", "/embeddings", {"input": text, "model": model})

        items = data.get("data") or []
        if not items or "embedding" not in items[0]:
            raise LLMResponseError(
                "Unexpected API response format: data or embedding not found"
            )
        return [float(v) for v in items[0]["embedding"]]

    def check_health(self) -> bool:
        """Check if the API is reachable with the configured key."""
        try:
            self._request("GET", "/models")
            return True
        except LLMError:
            return False

    def list_models(self) -> List[dict]:
        """List available models."""
        return self._request("GET", "/models").get("data", [])


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = {}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return f"HTTP {response.status_code} error"
