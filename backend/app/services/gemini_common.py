"""
Gemini helpers: run the blocking generate_content call off the event loop with a
timeout, retry transient failures, and pull the JSON object out of a reply.
"""
from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

from starlette.concurrency import run_in_threadpool

from app.config import settings

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
# Retried with exponential backoff (1s, 2s, ...) when the error text carries one of these statuses
RETRYABLE_STATUS_PATTERN = re.compile(r"\b(429|5\d{2})\b")


def _is_retryable_error(exc: BaseException) -> bool:
    msg = getattr(exc, "message", None) or str(exc)
    return bool(RETRYABLE_STATUS_PATTERN.search(msg))


async def run_generate_content(model, contents):
    """Call model.generate_content(contents) in a worker thread, retrying timeouts and 429/5xx."""
    timeout = float(settings.gemini_request_timeout_seconds or 90)
    for attempt in range(MAX_ATTEMPTS):
        last_attempt = attempt == MAX_ATTEMPTS - 1
        try:
            return await asyncio.wait_for(
                run_in_threadpool(model.generate_content, contents),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Gemini request timed out after %ss (attempt %d)", timeout, attempt + 1)
            if last_attempt:
                raise
        except Exception as e:
            if last_attempt or not _is_retryable_error(e):
                raise
            logger.warning("Gemini request failed (attempt %d), retrying: %s", attempt + 1, e)
        await asyncio.sleep(2 ** attempt)
    raise RuntimeError("run_generate_content: unexpected exit")


def parse_json_reply(response) -> dict[str, Any]:
    """JSON object from a Gemini response; tolerates a ```json fenced block."""
    text = (getattr(response, "text", None) or "").strip() if response else ""
    if not text:
        raise ValueError("Empty response from Gemini")
    if text.startswith("```"):
        text = text.split("\n", 1)[-1].rsplit("```", 1)[0].strip()
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Gemini reply is not a JSON object")
    return data
