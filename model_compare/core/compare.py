# model_compare/core/compare.py
import asyncio
import logging
from typing import List, Optional, Tuple

import httpx

from model_compare.core.caller import call_model
from model_compare.core.errors import ComparisonError, ValidationError
from model_compare.core.escape import escape_html
from model_compare.core.render import display_error, display_results
from model_compare.models import (CompareRequest, ComparisonOutcome, ModelInput,
                                  ModelResponse, ModelResult, ResultsPanel)

logger = logging.getLogger(__name__)


"""
run_comparison() is what the API calls:
    validate_request() → fails fast, nothing is sent

    compare_models() → both model calls run concurrently, then join

    display_results() / display_error() → fills the results panel
"""


def validate_request(request: CompareRequest) -> None:
    fields = {
        "endpoint1": request.model1.endpoint,
        "endpoint2": request.model2.endpoint,
        "apikey1": request.model1.api_key,
        "apikey2": request.model2.api_key,
        "model1": request.model1.model,
        "model2": request.model2.model,
        "prompt": request.prompt,
    }
    missing = [name for name, value in fields.items() if not value or not value.strip()]
    if missing:
        raise ValidationError(missing)


async def compare_models(request: CompareRequest,
                         client: Optional[httpx.AsyncClient] = None) -> ComparisonOutcome:
    validate_request(request)

    first, second = await _join_both(
        _call(request.model1, request, client),
        _call(request.model2, request, client),
    )

    return ComparisonOutcome(
        first=ModelResult(model=request.model1.model, response=first),
        second=ModelResult(model=request.model2.model, response=second),
    )


async def run_comparison(request: CompareRequest, panel: ResultsPanel,
                         client: Optional[httpx.AsyncClient] = None) -> ComparisonOutcome:
    try:
        outcome = await compare_models(request, client=client)
    except ComparisonError as e:
        logger.error(f"Error comparing responses: {e}")
        display_error(panel, escape_html(f"Error comparing responses: {e}"))
        raise

    display_results(panel, outcome, request.highlight)
    return outcome


def _call(target: ModelInput, request: CompareRequest, client: Optional[httpx.AsyncClient]):
    return call_model(
        target.endpoint,
        target.api_key,
        target.model,
        request.prompt,
        max_tokens=request.max_tokens,
        temperature=request.temperature,
        client=client,
    )


async def _join_both(call1, call2) -> Tuple[ModelResponse, ModelResponse]:
    # Waits for both calls; the first failure to complete wins and results are dropped.
    tasks = [asyncio.ensure_future(call1), asyncio.ensure_future(call2)]
    errors: List[BaseException] = []

    for finished in asyncio.as_completed(tasks):
        try:
            await finished
        except Exception as e:
            if errors:
                logger.warning(f"Second model call also failed: {e}")
            errors.append(e)

    if errors:
        raise errors[0]

    return tasks[0].result(), tasks[1].result()
