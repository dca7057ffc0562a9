"""Chat-completions client for the inference endpoint."""

import logging
from typing import Any

import httpx

from ..config import MonitorConfig
from ..errors import InferenceError

logger = logging.getLogger(__name__)


class InferenceClient:
    """Minimal client for an OpenAI-compatible chat-completions endpoint."""

    def __init__(
        self,
        config: MonitorConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize inference client.

        Args:
            config: Monitor configuration (endpoint, model, token, limits)
            transport: Optional httpx transport, used by tests
        """
        self.config = config
        self.transport = transport
        self.headers = {"Content-Type": "application/json"}
        if config.inference_token:
            self.headers["Authorization"] = f"Bearer {config.inference_token}"

    def build_payload(self, prompt: str) -> dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    async def complete(self, prompt: str) -> str:
        """Send a single-message completion request.

        Args:
            prompt: User message content

        Returns:
            Text content of the first choice

        Raises:
            InferenceError: On any non-2xx response
            httpx.HTTPError: On transport failures
        """
        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await client.post(
                self.config.models_endpoint,
                headers=self.headers,
                json=self.build_payload(prompt),
                timeout=self.config.request_timeout,
            )

            if not response.is_success:
                raise InferenceError(
                    f"Inference API error: {response.status_code} "
                    f"{response.reason_phrase}",
                    status_code=response.status_code,
                )

            data = response.json()
            return str(data["choices"][0]["message"]["content"])
