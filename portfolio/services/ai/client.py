"""
Gemini client with rate-limit-aware retries.

The free Gemini tier answers quota exhaustion with HTTP 429 and a message
such as "Please retry in 2.5s". Each call gets up to three attempts:

- rate limited, attempts left -> sleep, then retry
- rate limited, last attempt  -> RateLimitError with the wait hint
- any other failure           -> UpstreamError, no retry
- success without text        -> EmptyResponseError

Attempt ``n`` (1-based) waits ``max(hint, 5s * n)``. There is no jitter.
The client keeps no state between calls.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
)

from portfolio.config import Settings
from portfolio.core.errors import EmptyResponseError, RateLimitError, UpstreamError

logger = logging.getLogger(__name__)


GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash-lite"

MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 5.0  # seconds, scaled by attempt number


# =============================================================================
# Rate Limit Signal
# =============================================================================


@dataclass
class RateLimitSignal:
    """A rate-limit answer from the backend."""

    message: str
    retry_after: float | None = None  # seconds, when the backend suggests one


_RETRY_IN = re.compile(
    r"retry in (\d+(?:\.\d+)?)\s*(ms|milliseconds?|s|secs?|seconds?)?\b",
    re.IGNORECASE,
)
_NUMBER_WITH_UNIT = re.compile(
    r"(\d+(?:\.\d+)?)\s*(ms|milliseconds?|secs?|seconds?)\b",
    re.IGNORECASE,
)
_PROTO_DURATION = re.compile(r"^(\d+(?:\.\d+)?)s$")


def _to_seconds(value: str, unit: str | None) -> float:
    seconds = float(value)
    if unit and unit.lower().startswith("m"):
        seconds /= 1000
    return seconds


def _retry_hint(message: str, details: Any) -> float | None:
    match = _RETRY_IN.search(message) or _NUMBER_WITH_UNIT.search(message)
    if match:
        return _to_seconds(match.group(1), match.group(2))

    # google.rpc.RetryInfo carries a protobuf duration like "2s"
    if isinstance(details, list):
        for detail in details:
            delay = detail.get("retryDelay") if isinstance(detail, dict) else None
            match = _PROTO_DURATION.match(delay) if isinstance(delay, str) else None
            if match:
                return float(match.group(1))

    return None


def parse_rate_limit(status_code: int, body: str) -> RateLimitSignal | None:
    """
    Look for a rate-limit signal in a failed response.

    The signal is HTTP 429, or an error body with ``code`` 429 or status
    ``RESOURCE_EXHAUSTED``. Returns None for any other failure.
    """
    error: Any = {}
    try:
        payload = json.loads(body)
        if isinstance(payload, dict):
            error = payload.get("error") or {}
    except ValueError:
        pass
    if not isinstance(error, dict):
        error = {}

    rate_limited = (
        status_code == 429
        or error.get("code") == 429
        or error.get("status") == "RESOURCE_EXHAUSTED"
    )
    if not rate_limited:
        return None

    message = str(error.get("message") or body)
    return RateLimitSignal(
        message=message,
        retry_after=_retry_hint(message, error.get("details")),
    )


def compute_wait(
    attempt: int,
    hint: float | None = None,
    base_delay: float = DEFAULT_RETRY_DELAY,
) -> float:
    """
    Seconds to wait after rate-limited attempt ``attempt`` (1-based).

    The larger of the backend's hint and ``base_delay * attempt``.
    """
    return max(hint or 0.0, base_delay * attempt)


def extract_text(data: dict[str, Any]) -> str:
    """Pull the answer text out of a generateContent response."""
    error = data.get("error")
    if error:
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise UpstreamError(f"Gemini API error: {message}")

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        text = None

    if not isinstance(text, str) or not text.strip():
        raise EmptyResponseError("No response from Gemini")
    return text.strip()


# =============================================================================
# Client
# =============================================================================


SleepFunc = Callable[[float], Awaitable[None]]


class GeminiClient:
    """
    Stateless request/response client for Gemini generateContent.

    Usage:
        client = GeminiClient.from_settings(get_settings())
        text = await client.generate("Translate ...")

    ``transport`` and ``sleep`` are injectable so tests can fake the
    backend and observe waits without really sleeping.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        *,
        api_base: str = GEMINI_API_BASE,
        temperature: float = 0.7,
        max_output_tokens: int = 1024,
        timeout: float = 30.0,
        max_attempts: int = MAX_ATTEMPTS,
        retry_base_delay: float = DEFAULT_RETRY_DELAY,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: SleepFunc | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self.retry_base_delay = retry_base_delay
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> GeminiClient:
        """Build a client from application settings."""
        return cls(
            api_key=settings.ai_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            temperature=settings.ai_temperature,
            max_output_tokens=settings.ai_max_output_tokens,
            timeout=settings.ai_timeout_seconds,
            max_attempts=settings.ai_max_attempts,
            retry_base_delay=settings.ai_retry_base_delay,
            **kwargs,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """
        Send one instruction and return the trimmed answer text.

        Raises:
            RateLimitError: Still rate limited after the last attempt
            UpstreamError: Any other backend or transport failure
            EmptyResponseError: Backend answered without text
        """
        if not self.api_key:
            raise UpstreamError("GEMINI_API_KEY is not configured")

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self._wait,
            retry=retry_if_exception_type(RateLimitError),
            before_sleep=self._log_retry,
            sleep=self._sleep,
            reraise=True,
        )

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            async for attempt in retrying:
                with attempt:
                    text = await self._request(client, prompt, attempt.retry_state.attempt_number)

        return text

    async def _request(self, client: httpx.AsyncClient, prompt: str, attempt: int) -> str:
        """One attempt. Rate limits raise RateLimitError so the loop retries."""
        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

        try:
            response = await client.post(
                self.endpoint,
                json=body,
                headers={"x-goog-api-key": self.api_key},
            )
        except httpx.TransportError as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e

        if not response.is_success:
            signal = parse_rate_limit(response.status_code, response.text)
            if signal:
                raise RateLimitError(
                    retry_after=compute_wait(attempt, signal.retry_after, self.retry_base_delay),
                )
            raise UpstreamError(f"Gemini API error ({response.status_code}): {response.text}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Gemini returned a malformed response") from e

        if not isinstance(data, dict):
            raise UpstreamError("Gemini returned a malformed response")
        return extract_text(data)

    def _wait(self, retry_state: RetryCallState) -> float:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        hint = getattr(error, "retry_after", None)
        return compute_wait(retry_state.attempt_number, hint, self.retry_base_delay)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        wait = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "Rate limited by Gemini. Waiting %.1fs before retry %d/%d",
            wait,
            retry_state.attempt_number + 1,
            self.max_attempts,
        )
