# model_compare/core/normalizer.py
from typing import Any, Dict, Optional

from model_compare.core.errors import FormatError
from model_compare.models import ModelResponse, ResponseShape


"""
normalize() detects the response shape → calls:
    normalize_choice_style() → choices[0].message.content, total supplied by the upstream

    normalize_block_style() → content[0].text, total derived from the two components

anything else → FormatError
"""


def normalize(raw: Any) -> ModelResponse:
    # response_time_ms is attached later by the caller
    shape = detect_shape(raw)

    if shape == ResponseShape.CHOICE:
        return normalize_choice_style(raw)
    elif shape == ResponseShape.BLOCK:
        return normalize_block_style(raw)

    raise FormatError("Unexpected response format")


def detect_shape(raw: Any) -> Optional[ResponseShape]:
    # detects which of the two known wire shapes the payload uses.
    if not isinstance(raw, dict):
        return None

    first_choice = _first_item(raw.get("choices"))
    if isinstance(first_choice, dict) and isinstance(first_choice.get("message"), dict):
        return ResponseShape.CHOICE

    first_block = _first_item(raw.get("content"))
    if isinstance(first_block, dict) and isinstance(first_block.get("text"), str) and first_block["text"]:
        return ResponseShape.BLOCK

    return None


def normalize_choice_style(raw: Dict[str, Any]) -> ModelResponse:
    message = raw["choices"][0]["message"]
    content = message.get("content")
    usage = raw.get("usage")

    if not isinstance(usage, dict):
        return ModelResponse(content=content if isinstance(content, str) else "")

    return ModelResponse(
        content=content if isinstance(content, str) else "",
        prompt_tokens=_token_count(usage.get("prompt_tokens")),
        completion_tokens=_token_count(usage.get("completion_tokens")),
        total_tokens=_token_count(usage.get("total_tokens")),
    )


def normalize_block_style(raw: Dict[str, Any]) -> ModelResponse:
    content = raw["content"][0]["text"]
    usage = raw.get("usage")

    if not isinstance(usage, dict):
        return ModelResponse(content=content)

    prompt_tokens = _token_count(usage.get("input_tokens"))
    completion_tokens = _token_count(usage.get("output_tokens"))
    return ModelResponse(
        content=content,
        prompt_tokens=prompt_tokens,
        completion_tokens=completion_tokens,
        total_tokens=prompt_tokens + completion_tokens,
    )


def _first_item(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _token_count(value: Any) -> int:
    # missing, null, non-numeric, fractional and negative counts all read as 0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)
