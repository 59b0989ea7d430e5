"""Text generation HTTP client (Ollama-compatible /api/generate)"""

import json
import httpx
from typing import Any
from fd_gateway.domain.models import RecommendationRequest
from fd_gateway.domain.exceptions import TextGenerationError
from fd_gateway.domain.prompts import render_prompt
from fd_gateway.config import settings


class TextGenerationClient:
    """Client for the external language model service"""

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        temperature: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.textgen_api_base).rstrip("/")
        self.model = model or settings.textgen_model
        self.timeout = timeout or settings.http_timeout_seconds
        self.temperature = settings.textgen_temperature if temperature is None else temperature
        self.transport = transport

    async def generate(self, request: RecommendationRequest, template: str) -> Any:
        """
        Render the template with the request and return the model's JSON reply.

        Non-streaming, JSON output mode. The decoded object is returned as-is;
        checking its fields is the caller's job.

        Raises:
            TextGenerationError: On timeout, HTTP errors, empty or non-JSON output
        """
        payload = {
            "model": self.model,
            "prompt": render_prompt(
                template,
                financial_goals=request.financial_goals,
                investment_amount=request.investment_amount,
                risk_tolerance=request.risk_tolerance.value,
            ),
            "format": "json",
            "stream": False,
            "options": {"temperature": self.temperature},
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(f"{self.base_url}/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise TextGenerationError(f"Text generation timeout after {self.timeout}s", reason="timeout") from e
            except httpx.HTTPStatusError as e:
                raise TextGenerationError(
                    f"Text generation error: {e.response.status_code}", reason="http_error"
                ) from e
            except httpx.RequestError as e:
                raise TextGenerationError(f"Text generation unreachable: {e}", reason="transport_error") from e
            except ValueError as e:
                raise TextGenerationError(f"Invalid envelope from text generation: {e}", reason="invalid_json") from e

        text = (data or {}).get("response", "") if isinstance(data, dict) else ""
        if not text or not text.strip():
            raise TextGenerationError("Empty response from text generation", reason="empty_response")

        try:
            return json.loads(text)
        except ValueError as e:
            raise TextGenerationError(f"Model output is not JSON: {e}", reason="invalid_json") from e
