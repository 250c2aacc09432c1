# model_compare/core/caller.py
import logging
import time
from typing import Any, Dict, Optional

import httpx

from model_compare.config import settings
from model_compare.core.errors import FormatError
from model_compare.core.normalizer import normalize
from model_compare.models import ModelResponse
from model_compare.services.http_client import post_json

logger = logging.getLogger(__name__)


def build_payload(model: str, prompt: str, max_tokens: Optional[int] = None,
                  temperature: Optional[float] = None) -> Dict[str, Any]:
    # Chat-completions style body; both supported upstreams accept it.
    return {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": prompt,
            }
        ],
        "max_tokens": max_tokens if max_tokens is not None else settings.MAX_TOKENS,
        "temperature": temperature if temperature is not None else settings.TEMPERATURE,
    }


async def call_model(
        endpoint: str,
        api_key: str,
        model: str,
        prompt: str,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
) -> ModelResponse:
    """
    Sends the prompt to one endpoint and returns its normalized response.

    Raises TransportError for network failures and non-success statuses, and
    FormatError when the body is not JSON or matches neither response shape.
    """
    payload = build_payload(model, prompt, max_tokens, temperature)

    start = time.perf_counter()
    response = await post_json(endpoint, payload, api_key, client=client)
    response_time_ms = int((time.perf_counter() - start) * 1000)

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Response from {endpoint} is not valid JSON: {e}")
        raise FormatError("Unexpected response format") from e

    result = normalize(data)
    logger.info(f"{model} answered in {response_time_ms}ms using {result.total_tokens} tokens")
    return result.model_copy(update={"response_time_ms": response_time_ms})
