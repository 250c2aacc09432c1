# model_compare/services/http_client.py
import httpx
from typing import Optional, Dict, Any
import logging

from model_compare.config import settings
from model_compare.core.errors import TransportError

logger = logging.getLogger(__name__)


async def post_json(
        url: str,
        payload: Dict[str, Any],
        api_key: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
) -> httpx.Response:
    """
    Posts `payload` as JSON with a bearer token and returns the successful response.
    A caller-supplied client is used as-is and left open.
    """
    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }

    try:
        if client is not None:
            response = await _send(client, url, payload, headers)
        else:
            async with httpx.AsyncClient(timeout=timeout or settings.REQUEST_TIMEOUT) as own_client:
                response = await _send(own_client, url, payload, headers)
    except httpx.HTTPError as e:
        logger.error(f"HTTP request failed for {url}: {e}")
        raise TransportError(f"HTTP request failed: {e}") from e

    if not response.is_success:
        logger.error(f"Request to {url} returned {response.status_code} {response.reason_phrase}")
        raise TransportError.from_status(response.status_code, response.reason_phrase)

    return response


async def _send(client: httpx.AsyncClient, url: str, payload: Dict[str, Any], headers: Dict[str, str]) -> httpx.Response:
    request_obj = client.build_request("POST", url, json=payload, headers=headers)

    # Log the full details of the request that will be sent
    logger.info(f"Preparing to send Request:")
    logger.info(f"  Method: {request_obj.method}")
    logger.info(f"  URL: {request_obj.url}")
    logger.info(f"  Headers: {_redacted(request_obj.headers)}")
    logger.info(
        f"  Body (first 200 chars): {request_obj.content.decode(errors='ignore')[:200] if request_obj.content else 'None'}")

    response = await client.send(request_obj)

    logger.info(f"Received Response Status: {response.status_code} for URL: {url}")
    logger.debug(f"Received Response Body Preview: {response.text[:200]}...")
    return response


def _redacted(headers: httpx.Headers) -> Dict[str, str]:
    shown = dict(headers)
    if "authorization" in shown:
        shown["authorization"] = "Bearer ***"
    return shown
